"""번들 재고 API 라우터"""
import logging
from typing import Iterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from app.api.bigcommerce_client import BigCommerceClient
from app.config import settings
from app.constants import MSG_BUNDLE_STOCK_ERROR, MSG_UNAUTHORIZED
from app.models.bundle import BundleStockResponse
from app.services.bundle_resolver import BundleStockService
from app.services.session_service import StoreSession, resolve_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bundles", tags=["bundles"])


def get_store_session(context: Optional[str] = Query(None)) -> StoreSession:
    """context 쿼리 파라미터 → 스토어 세션 (없거나 무효면 401)"""
    session = resolve_session(context)
    if session is None:
        raise HTTPException(status_code=401, detail=MSG_UNAUTHORIZED)
    return session


def get_bigcommerce_client(
    session: StoreSession = Depends(get_store_session),
) -> Iterator[BigCommerceClient]:
    """요청마다 새 클라이언트 생성, 응답 후 종료"""
    client = BigCommerceClient(
        store_hash=session.store_hash,
        access_token=session.access_token,
        api_url=settings.bigcommerce_api_url,
        timeout=settings.bigcommerce_timeout,
    )
    try:
        yield client
    finally:
        client.close()


@router.get(
    "/stock",
    response_model=BundleStockResponse,
    response_model_exclude_none=True,
)
def get_bundle_stock(client: BigCommerceClient = Depends(get_bigcommerce_client)):
    """번들 카테고리 전체 스캔 → 번들별 구성품 재고"""
    try:
        bundles = BundleStockService(client).build_bundle_stock(settings.bundle_category_name)
    except Exception:
        # 부분 결과 없이 500
        logger.exception("번들 재고 조회 오류")
        return JSONResponse(status_code=500, content={"message": MSG_BUNDLE_STOCK_ERROR})

    return BundleStockResponse(bundles=bundles)
