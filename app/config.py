"""애플리케이션 설정"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """환경변수 기반 설정"""

    # BigCommerce 스토어 (앱 설치 시 발급받은 토큰)
    bigcommerce_store_hash: Optional[str] = None
    bigcommerce_access_token: Optional[str] = None
    bigcommerce_api_url: str = "https://api.bigcommerce.com"
    bigcommerce_timeout: int = 30  # 초

    # 번들 카테고리 (이름 대소문자 무시)
    bundle_category_name: str = "Bundle"

    # Security: 세션 context 토큰 암호화 키 (Fernet)
    encryption_key: Optional[str] = None
    session_ttl_seconds: Optional[int] = None  # None이면 만료 없음

    # Logging
    log_level: str = "INFO"

    # 대시보드 → API 호출 주소
    api_base_url: str = "http://localhost:8000"

    class Config:
        env_file = ".env"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()
