"""
스토어 세션 처리
================
앱 iframe에서 넘어오는 context 토큰(Fernet 암호화 JSON)을 검증하고
해당 스토어의 API 토큰을 찾는다.

    context = encode_context("abc123", user_id=7)
    session = resolve_session(context)   # 실패 시 None → 401
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional

from cryptography.fernet import InvalidToken

from app.config import Settings, settings as default_settings
from app.utils.encryption import EncryptionManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSession:
    """요청 1건 동안 유효한 스토어 세션"""
    store_hash: str
    access_token: str
    user_id: Optional[int] = None


def _encryptor(config: Settings) -> Optional[EncryptionManager]:
    if not config.encryption_key:
        logger.error("ENCRYPTION_KEY 미설정, 세션 context를 검증할 수 없습니다")
        return None
    try:
        return EncryptionManager(config.encryption_key)
    except ValueError as e:
        logger.error(f"ENCRYPTION_KEY 형식 오류: {e}")
        return None


def encode_context(store_hash: str, user_id: Optional[int] = None, config: Optional[Settings] = None) -> str:
    """
    세션 context 토큰 발급

    Raises:
        RuntimeError: 암호화 키 미설정/형식 오류
    """
    encryptor = _encryptor(config or default_settings)
    if encryptor is None:
        raise RuntimeError("ENCRYPTION_KEY가 올바르게 설정되지 않았습니다")
    payload = {"store_hash": store_hash, "user_id": user_id}
    return encryptor.encrypt(json.dumps(payload))


def resolve_session(context: Optional[str], config: Optional[Settings] = None) -> Optional[StoreSession]:
    """
    context 토큰 → StoreSession

    Returns:
        유효하지 않은 토큰, 만료, 다른 스토어, 토큰 미설정이면 None
    """
    config = config or default_settings
    if not context:
        return None

    encryptor = _encryptor(config)
    if encryptor is None:
        return None

    try:
        payload = json.loads(encryptor.decrypt(context, ttl=config.session_ttl_seconds))
    except InvalidToken:
        logger.info("세션 context 검증 실패 (변조/만료)")
        return None
    except ValueError:
        logger.info("세션 context payload 형식 오류")
        return None

    if not isinstance(payload, dict):
        return None

    store_hash = payload.get("store_hash")
    if not store_hash or store_hash != config.bigcommerce_store_hash:
        logger.info(f"등록되지 않은 스토어: {store_hash}")
        return None

    if not config.bigcommerce_access_token:
        logger.error(f"스토어 {store_hash} 액세스 토큰 미설정")
        return None

    return StoreSession(
        store_hash=store_hash,
        access_token=config.bigcommerce_access_token,
        user_id=payload.get("user_id"),
    )
