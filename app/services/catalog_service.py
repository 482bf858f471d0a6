"""번들 카테고리 상품 조회"""
import logging
from typing import List

from app.api.bigcommerce_client import BigCommerceClient
from app.models.catalog import CatalogProduct

logger = logging.getLogger(__name__)


def fetch_category_products(client: BigCommerceClient, category_name: str) -> List[CatalogProduct]:
    """
    카테고리 이름으로 전체 상품 조회 (모든 페이지)

    Args:
        client: BigCommerce 클라이언트
        category_name: 카테고리 이름 (대소문자 무시)

    Returns:
        상품 리스트 (페이지 순서), 카테고리가 없으면 빈 리스트

    Raises:
        BigCommerceError: 카테고리/페이지 조회 실패
    """
    category = client.find_category_by_name(category_name)
    if category is None:
        logger.info(f"'{category_name}' 카테고리 없음 → 빈 결과")
        return []

    logger.info(f"'{category.name}' 카테고리(id={category.id}) 상품 조회 시작")
    products = client.list_category_products(category.id)
    logger.info(f"'{category.name}' 카테고리 상품 {len(products)}개 조회 완료")
    return products
