"""번들 재고 모델

linked_product_ids 메타필드 항목(LinkedComponentRef)과
API 응답(BundleComponent, BundleStockInfo)을 정의한다.
응답 JSON은 camelCase (productId, variantId, maxBundles).
"""
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.constants import DEFAULT_COMPONENT_QUANTITY


class LinkedComponentRef(BaseModel):
    """번들에 연결된 구성품 참조 (productId 필수, variantId 선택)"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    product_id: int = Field(validation_alias=AliasChoices("productId", "product_id"))
    variant_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("variantId", "variant_id"),
    )
    quantity: int = DEFAULT_COMPONENT_QUANTITY


class BundleComponent(BaseModel):
    """번들 구성품 + 현재 재고"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    variant_id: Optional[int] = Field(default=None, alias="variantId")
    name: str
    sku: str
    quantity: int
    stock: int
    max_bundles: int = Field(alias="maxBundles")


class BundleStockInfo(BaseModel):
    """번들 1건 (상품 또는 variant 단위)"""
    id: int
    name: str
    sku: str
    stock: int
    components: List[BundleComponent] = Field(default_factory=list)


class BundleStockResponse(BaseModel):
    bundles: List[BundleStockInfo] = Field(default_factory=list)


def compute_max_bundles(stock: int, quantity: int) -> int:
    """
    구성품 재고로 만들 수 있는 번들 수

    floor(stock / quantity). quantity가 0 이하인 잘못된 참조는 0,
    음수 재고는 0으로 본다.
    """
    if quantity <= 0:
        return 0
    return max(stock, 0) // quantity
