"""FastAPI 메인 애플리케이션"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.api.bundles import router as bundles_router
from app.config import settings
from app.constants import MSG_METHOD_NOT_ALLOWED
import logging

# 로깅 설정
logging.basicConfig(
    level=settings.log_level,
    format='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)

# FastAPI 앱 생성
app = FastAPI(
    title="BigCommerce 번들 재고",
    description="번들 상품 구성품 재고 + 조립 가능 수량 조회",
    version="0.1.0"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP 오류 응답을 {"message": ...} 형식으로 통일"""
    message = MSG_METHOD_NOT_ALLOWED if exc.status_code == 405 else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


@app.on_event("startup")
async def startup_event():
    """앱 시작 시 실행"""
    logger.info("애플리케이션 시작")
    if not settings.encryption_key:
        logger.warning("ENCRYPTION_KEY 미설정: 모든 요청이 401 처리됩니다")


@app.on_event("shutdown")
async def shutdown_event():
    """앱 종료 시 실행"""
    logger.info("애플리케이션 종료")


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "BigCommerce 번들 재고",
        "version": "0.1.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """헬스 체크"""
    return {"status": "healthy"}


# API 라우터 등록
app.include_router(bundles_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
