"""유틸리티 모듈"""

from .encryption import EncryptionManager
from .validators import LinkedProductsError, parse_linked_products

__all__ = [
    "EncryptionManager",
    "LinkedProductsError",
    "parse_linked_products",
]
