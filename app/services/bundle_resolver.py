"""
번들 재고 계산 모듈
===================
메타필드로 번들 상품/variant를 찾고, 구성품 재고를 조회해
구성품별 최대 조립 가능 수량(maxBundles)을 계산한다.

    bundle 메타필드 (namespace="bundle"):
      is_bundle          = "true"
      linked_product_ids = '[{"productId": 20, "quantity": 2}, ...]'

모든 호출은 순차 실행 (요청당 원격 호출 1개씩). 구성품 캐시 없음.

사용법:
    service = BundleStockService(client)
    bundles = service.build_bundle_stock("Bundle")
"""
import logging
from typing import List, Optional

from app.api.bigcommerce_client import BigCommerceClient
from app.constants import (
    BUNDLE_METAFIELD_NAMESPACE,
    IS_BUNDLE_KEY,
    IS_BUNDLE_TRUE,
    LINKED_PRODUCTS_KEY,
    UNKNOWN_COMPONENT_NAME,
    UNKNOWN_COMPONENT_SKU,
)
from app.models.bundle import (
    BundleComponent,
    BundleStockInfo,
    LinkedComponentRef,
    compute_max_bundles,
)
from app.models.catalog import CatalogProduct, Metafield
from app.services.catalog_service import fetch_category_products
from app.utils.validators import parse_linked_products

logger = logging.getLogger(__name__)


def find_metafield(metafields: List[Metafield], key: str) -> Optional[Metafield]:
    """bundle namespace에서 key가 일치하는 첫 메타필드"""
    for field in metafields:
        if field.namespace == BUNDLE_METAFIELD_NAMESPACE and field.key == key:
            return field
    return None


def read_linked_components(metafields: List[Metafield]) -> Optional[List[LinkedComponentRef]]:
    """
    메타필드에서 번들 구성품 참조 추출

    Returns:
        번들이 아니거나 linked_product_ids가 없으면 None

    Raises:
        LinkedProductsError: linked_product_ids 값 형식 오류
    """
    flag = find_metafield(metafields, IS_BUNDLE_KEY)
    if flag is None or flag.value != IS_BUNDLE_TRUE:
        return None

    linked = find_metafield(metafields, LINKED_PRODUCTS_KEY)
    if linked is None:
        return None

    return parse_linked_products(linked.value)


def unknown_component(ref: LinkedComponentRef) -> BundleComponent:
    """조회 실패 구성품 (재고 0)"""
    return BundleComponent(
        product_id=ref.product_id,
        variant_id=ref.variant_id or None,
        name=UNKNOWN_COMPONENT_NAME,
        sku=UNKNOWN_COMPONENT_SKU,
        quantity=ref.quantity,
        stock=0,
        max_bundles=0,
    )


class BundleStockService:
    """
    번들 재고 계산기

    Attributes:
        client: BigCommerce 클라이언트 (세션이 확정된 상태로 주입)
    """

    def __init__(self, client: BigCommerceClient):
        self.client = client

    def build_bundle_stock(self, category_name: str) -> List[BundleStockInfo]:
        """
        카테고리 전체 상품을 스캔해 번들 재고 목록 생성

        Raises:
            BigCommerceError: 상품/메타필드 조회 실패
            LinkedProductsError: linked_product_ids 형식 오류
        """
        products = fetch_category_products(self.client, category_name)
        return self.collect_bundles(products)

    def collect_bundles(self, products: List[CatalogProduct]) -> List[BundleStockInfo]:
        """상품 순서대로 상품 번들 → variant 번들 순으로 수집"""
        bundles: List[BundleStockInfo] = []

        for product in products:
            bundle = self.product_bundle(product)
            if bundle is not None:
                bundles.append(bundle)

            for variant in product.variants:
                metafields = self.client.get_variant_metafields(product.id, variant.id)
                refs = read_linked_components(metafields)
                if refs is None:
                    continue
                bundles.append(BundleStockInfo(
                    id=variant.id,
                    name=product.variant_name(variant),
                    sku=variant.sku,
                    stock=variant.stock,
                    components=self.resolve_components(refs),
                ))

        logger.info(f"번들 {len(bundles)}개 (상품 {len(products)}개 스캔)")
        return bundles

    def product_bundle(self, product: CatalogProduct) -> Optional[BundleStockInfo]:
        metafields = self.client.get_product_metafields(product.id)
        refs = read_linked_components(metafields)
        if refs is None:
            return None
        return BundleStockInfo(
            id=product.id,
            name=product.name,
            sku=product.sku,
            stock=product.stock,
            components=self.resolve_components(refs),
        )

    def resolve_components(self, refs: List[LinkedComponentRef]) -> List[BundleComponent]:
        return [self.resolve_component(ref) for ref in refs]

    def resolve_component(self, ref: LinkedComponentRef) -> BundleComponent:
        """
        구성품 1개 조회 + maxBundles 계산

        조회 실패 시 요청 전체를 실패시키지 않고 'Unknown Component'로 대체
        """
        try:
            if ref.variant_id:
                variant = self.client.get_variant(ref.product_id, ref.variant_id)
                parent = self.client.get_product(ref.product_id)
                name = parent.variant_name(variant)
                sku = variant.sku
                stock = variant.stock
            else:
                product = self.client.get_product(ref.product_id)
                name = product.name
                sku = product.sku
                stock = product.stock
        except Exception as e:
            # 구성품 단위로 격리 (번들 행은 유지)
            logger.warning(
                f"구성품 조회 실패 {ref.product_id}:{ref.variant_id or 'N/A'}: "
                f"{type(e).__name__}: {e}"
            )
            return unknown_component(ref)

        return BundleComponent(
            product_id=ref.product_id,
            variant_id=ref.variant_id or None,
            name=name,
            sku=sku,
            quantity=ref.quantity,
            stock=stock,
            max_bundles=compute_max_bundles(stock, ref.quantity),
        )
