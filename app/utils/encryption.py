"""암호화 유틸리티"""
from typing import Optional

from cryptography.fernet import Fernet


class EncryptionManager:
    """세션 context 토큰 암호화 관리자"""

    def __init__(self, key: str):
        self.cipher = Fernet(key.encode())

    def encrypt(self, plaintext: str) -> str:
        """
        평문 암호화

        Args:
            plaintext: 암호화할 평문

        Returns:
            암호화된 문자열 (URL-safe base64)
        """
        if not plaintext:
            return ""
        return self.cipher.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str, ttl: Optional[int] = None) -> str:
        """
        암호문 복호화

        Args:
            ciphertext: 복호화할 암호문
            ttl: 토큰 최대 수명 (초, None이면 검사 안 함)

        Returns:
            복호화된 평문

        Raises:
            cryptography.fernet.InvalidToken: 변조/만료/키 불일치
        """
        if not ciphertext:
            return ""
        return self.cipher.decrypt(ciphertext.encode(), ttl=ttl).decode()
