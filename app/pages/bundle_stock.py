"""번들 재고 페이지: 번들별 구성품 재고 + 병목 구성품 강조"""
import logging
from typing import List, MutableMapping, Optional

import pandas as pd
import requests
import streamlit as st

from app.models.bundle import BundleStockInfo, BundleStockResponse
from app.services.bundle_view import filter_bundles, limiting_component_indexes, limiting_minimum

logger = logging.getLogger(__name__)

LIMITING_STYLE = "font-weight: bold; color: #d04a02"
COMPONENT_COLUMNS = ["구성품", "SKU", "필요 수량", "재고", "최대 번들", "병목"]

# session_state 키: context별 조회 결과
BUNDLE_STATE_KEY = "bundle_stock_by_context"


class BundleStockApiError(Exception):
    """번들 재고 API 오류 (payload의 message 포함)"""
    pass


def fetch_bundle_stock(api_base_url: str, context: str, timeout: int = 120) -> List[BundleStockInfo]:
    """
    GET /api/bundles/stock 호출

    Raises:
        BundleStockApiError: 2xx 이외 응답 또는 네트워크 오류
    """
    url = f"{api_base_url.rstrip('/')}/api/bundles/stock"
    try:
        res = requests.get(url, params={"context": context}, timeout=timeout)
    except requests.RequestException as e:
        raise BundleStockApiError(f"API 연결 실패: {e}")

    try:
        data = res.json()
    except ValueError:
        data = {}

    if not res.ok:
        message = data.get("message") if isinstance(data, dict) else None
        raise BundleStockApiError(message or "Failed to fetch bundle stock")

    return BundleStockResponse.model_validate(data).bundles


def load_bundle_stock(
    state: MutableMapping,
    api_base_url: str,
    context: str,
    refresh: bool = False,
) -> List[BundleStockInfo]:
    """
    context별로 한 번만 조회 (검색/펼치기 rerun마다 재스캔하지 않음)

    Args:
        state: st.session_state
        refresh: True면 저장된 결과를 버리고 다시 조회

    Raises:
        BundleStockApiError: 조회 실패 (실패 결과는 저장하지 않음)
    """
    cache = state.setdefault(BUNDLE_STATE_KEY, {})
    if refresh:
        cache.pop(context, None)
    if context not in cache:
        cache[context] = fetch_bundle_stock(api_base_url, context)
    return cache[context]


def components_frame(bundle: BundleStockInfo) -> pd.DataFrame:
    """구성품 테이블 (병목 여부 컬럼 포함)"""
    limiting = set(limiting_component_indexes(bundle))
    rows = [
        {
            "구성품": c.name,
            "SKU": c.sku,
            "필요 수량": c.quantity,
            "재고": c.stock,
            "최대 번들": c.max_bundles,
            "병목": i in limiting,
        }
        for i, c in enumerate(bundle.components)
    ]
    return pd.DataFrame(rows, columns=COMPONENT_COLUMNS)


def _highlight_limiting(row: pd.Series) -> List[str]:
    style = LIMITING_STYLE if row["병목"] else ""
    return [style] * len(row)


def render_bundle_stock(api_base_url: str, context: Optional[str]):
    """번들 재고 페이지 렌더링"""
    _title_col, _refresh_col = st.columns([5, 1])
    with _title_col:
        st.subheader("번들 재고")
    with _refresh_col:
        _btn_refresh = st.button("새로고침", key="btn_bundle_refresh", width="stretch")

    if not context:
        st.warning("세션 context가 없습니다. 스토어 관리자 화면에서 앱을 열어주세요.")
        return

    with st.spinner("번들 재고 조회 중..."):
        try:
            bundles = load_bundle_stock(st.session_state, api_base_url, context, refresh=_btn_refresh)
        except BundleStockApiError as e:
            st.error(f"번들 재고 조회 오류: {e}")
            logger.warning(f"번들 재고 조회 오류: {e}")
            return

    query = st.text_input("검색 (번들 이름 / SKU)", key="bundle_search")
    shown = filter_bundles(bundles, query)
    st.caption(f"번들 {len(shown)}개 / 전체 {len(bundles)}개")

    if not shown:
        st.info("표시할 번들이 없습니다.")
        return

    for bundle in shown:
        buildable = limiting_minimum(bundle)
        with st.expander(f"{bundle.name}  ·  {bundle.sku}  ·  재고 {bundle.stock}  ·  조립 가능 {buildable}"):
            if not bundle.components:
                st.caption("연결된 구성품이 없습니다.")
                continue
            df = components_frame(bundle)
            st.dataframe(df.style.apply(_highlight_limiting, axis=1), hide_index=True)
