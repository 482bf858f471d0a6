"""
bundle_view.py 테스트
=====================
병목 구성품, 검색 필터, 화면용 테이블
"""
import sys
from pathlib import Path

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.models.bundle import BundleComponent, BundleStockInfo
from app.pages.bundle_stock import components_frame
from app.services.bundle_view import filter_bundles, limiting_component_indexes, limiting_minimum


def _component(product_id, max_bundles, name="c", sku="C"):
    return BundleComponent(
        product_id=product_id, name=name, sku=sku, quantity=1,
        stock=max_bundles, max_bundles=max_bundles,
    )


def _bundle(bundle_id, name, sku, components=None):
    return BundleStockInfo(id=bundle_id, name=name, sku=sku, stock=0, components=components or [])


class TestLimitingComponent:
    """병목 구성품 계산"""

    def test_minimum(self):
        bundle = _bundle(1, "Kit", "KIT", [_component(20, 5), _component(21, 3)])
        assert limiting_minimum(bundle) == 3
        assert limiting_component_indexes(bundle) == [1]

    def test_no_components(self):
        bundle = _bundle(1, "Kit", "KIT")
        assert limiting_minimum(bundle) == 0
        assert limiting_component_indexes(bundle) == []

    def test_ties_mark_all(self):
        bundle = _bundle(1, "Kit", "KIT", [_component(20, 2), _component(21, 7), _component(22, 2)])
        assert limiting_component_indexes(bundle) == [0, 2]

    def test_unknown_component_limits_to_zero(self):
        bundle = _bundle(1, "Kit", "KIT", [_component(20, 4), _component(404, 0, name="Unknown Component")])
        assert limiting_minimum(bundle) == 0


class TestFilterBundles:
    """검색 필터 (이름/SKU, 대소문자 무시)"""

    def setup_method(self):
        self.bundles = [
            _bundle(1, "Summer Kit", "BDL-SUM", [_component(20, 1, name="Beach Towel", sku="TOWEL")]),
            _bundle(2, "Winter Set", "BDL-WIN"),
            _bundle(3, "Gift Box", "GIFT-01"),
        ]

    def test_blank_query_returns_all(self):
        assert filter_bundles(self.bundles, "") == self.bundles
        assert filter_bundles(self.bundles, "   ") == self.bundles

    def test_name_match_case_insensitive(self):
        assert [b.id for b in filter_bundles(self.bundles, "winter")] == [2]

    def test_sku_match(self):
        assert [b.id for b in filter_bundles(self.bundles, "bdl-")] == [1, 2]

    def test_component_fields_not_searched(self):
        assert filter_bundles(self.bundles, "towel") == []

    def test_match_keeps_all_components(self):
        result = filter_bundles(self.bundles, "summer")
        assert len(result[0].components) == 1


class TestComponentsFrame:
    """화면용 구성품 테이블"""

    def test_limiting_column(self):
        bundle = _bundle(1, "Kit", "KIT", [_component(20, 5, name="Mug"), _component(21, 3, name="Shirt")])
        df = components_frame(bundle)
        assert list(df["구성품"]) == ["Mug", "Shirt"]
        assert list(df["병목"]) == [False, True]

    def test_empty_bundle(self):
        df = components_frame(_bundle(1, "Kit", "KIT"))
        assert df.empty
