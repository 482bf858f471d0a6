"""BigCommerce 카탈로그 응답 모델 (읽기 전용 스냅샷)"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.constants import VARIANT_FALLBACK_LABEL, VARIANT_LABEL_SEPARATOR


class _CatalogModel(BaseModel):
    # API 응답의 나머지 필드는 무시
    model_config = ConfigDict(extra="ignore")


class OptionValue(_CatalogModel):
    """variant 옵션값 (예: 색상 = Red)"""
    label: str = ""
    option_display_name: Optional[str] = None


class CatalogVariant(_CatalogModel):
    """상품 variant"""
    id: int
    product_id: Optional[int] = None
    sku: str = ""
    inventory_level: Optional[int] = 0
    option_values: List[OptionValue] = Field(default_factory=list)

    @property
    def stock(self) -> int:
        return self.inventory_level or 0

    @property
    def display_label(self) -> str:
        """옵션값 라벨을 ' - '로 연결 (옵션 없으면 'Variant')"""
        labels = [ov.label for ov in self.option_values]
        return VARIANT_LABEL_SEPARATOR.join(labels) or VARIANT_FALLBACK_LABEL


class CatalogProduct(_CatalogModel):
    """카탈로그 상품"""
    id: int
    name: str = ""
    sku: str = ""
    inventory_level: Optional[int] = 0
    variants: List[CatalogVariant] = Field(default_factory=list)

    @property
    def stock(self) -> int:
        return self.inventory_level or 0

    def variant_name(self, variant: CatalogVariant) -> str:
        """'<상품명> - <옵션 라벨>' 형식의 표시명"""
        return f"{self.name}{VARIANT_LABEL_SEPARATOR}{variant.display_label}"


class CatalogCategory(_CatalogModel):
    id: int
    name: str = ""


class Metafield(_CatalogModel):
    """상품/variant에 붙은 namespace 단위 key-value 속성"""
    namespace: str = ""
    key: str
    value: Optional[str] = None
