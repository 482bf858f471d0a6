"""번들 재고 화면용 헬퍼 (병목 구성품 계산, 검색 필터)"""
from typing import List

from app.models.bundle import BundleStockInfo


def limiting_minimum(bundle: BundleStockInfo) -> int:
    """구성품 maxBundles 최솟값 = 현재 조립 가능한 번들 수 (구성품 없으면 0)"""
    if not bundle.components:
        return 0
    return min(c.max_bundles for c in bundle.components)


def limiting_component_indexes(bundle: BundleStockInfo) -> List[int]:
    """maxBundles가 최솟값과 같은 구성품 인덱스 (동률이면 모두)"""
    if not bundle.components:
        return []
    minimum = limiting_minimum(bundle)
    return [i for i, c in enumerate(bundle.components) if c.max_bundles == minimum]


def filter_bundles(bundles: List[BundleStockInfo], query: str) -> List[BundleStockInfo]:
    """
    번들 이름/SKU 부분 일치 검색 (대소문자 무시)

    구성품 필드는 검색하지 않는다. 빈 검색어면 전체 반환.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(bundles)
    return [
        b for b in bundles
        if needle in b.name.lower() or needle in (b.sku or "").lower()
    ]
