"""
입력 검증 모듈
==============
번들 메타필드(linked_product_ids) 값 검증

사용법:
    refs = parse_linked_products('[{"productId": 20, "quantity": 2}]')
    for ref in refs:
        print(ref.product_id, ref.variant_id, ref.quantity)

허용 형식 (JSON 배열의 각 항목):
    {"productId": 20, "variantId": 5, "quantity": 2}
    {"product_id": 20, "variant_id": 5, "quantity": 2}
    20                      # 상품 ID만 (quantity=1)
"""
import json
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from app.models.bundle import LinkedComponentRef

logger = logging.getLogger(__name__)


class LinkedProductsError(ValueError):
    """linked_product_ids 값 형식 오류"""

    def __init__(self, message: str, value: Any = None, index: Optional[int] = None):
        self.message = message
        self.value = value
        self.index = index
        super().__init__(message)


def _parse_entry(entry: Any, index: int) -> LinkedComponentRef:
    # 레거시 형식: 상품 ID 정수
    if isinstance(entry, int) and not isinstance(entry, bool):
        return LinkedComponentRef(product_id=entry)

    if not isinstance(entry, dict):
        raise LinkedProductsError(
            f"linked_product_ids[{index}]: 객체 또는 상품 ID가 아닙니다 ({type(entry).__name__})",
            entry,
            index,
        )

    try:
        return LinkedComponentRef.model_validate(entry)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "?" for err in e.errors())
        raise LinkedProductsError(
            f"linked_product_ids[{index}]: 잘못된 필드 ({fields})",
            entry,
            index,
        ) from e


def parse_linked_products(raw: Optional[str]) -> List[LinkedComponentRef]:
    """
    linked_product_ids 메타필드 값 파싱

    Args:
        raw: JSON 문자열 (배열)

    Returns:
        LinkedComponentRef 리스트 (원본 순서 유지)

    Raises:
        LinkedProductsError: JSON 파싱 실패, 배열이 아님, 항목 형식 오류
    """
    if raw is None:
        raise LinkedProductsError("linked_product_ids 값이 비어 있습니다")

    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LinkedProductsError(f"linked_product_ids JSON 파싱 실패: {e.msg}", raw) from e

    if not isinstance(decoded, list):
        raise LinkedProductsError(
            f"linked_product_ids는 JSON 배열이어야 합니다 ({type(decoded).__name__})",
            raw,
        )

    refs = [_parse_entry(entry, i) for i, entry in enumerate(decoded)]
    logger.debug(f"linked_product_ids 파싱: {len(refs)}개 구성품")
    return refs
