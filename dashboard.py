"""
BigCommerce 번들 재고 대시보드
==============================
번들 상품별 구성품 재고 + 조립 가능 수량
실행: streamlit run dashboard.py
"""
import sys
from pathlib import Path
import logging

import streamlit as st

# 프로젝트 루트를 path에 추가
ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

from app.config import settings
from app.pages.bundle_stock import render_bundle_stock

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# ─── 페이지 설정 ───
st.set_page_config(page_title="번들 재고", page_icon="📦", layout="wide")

# 스토어 관리자 iframe에서 ?context=... 로 전달
render_bundle_stock(settings.api_base_url, st.query_params.get("context"))
