"""
세션 context 토큰 발급
======================
대시보드/API 호출용 context 토큰 생성 (.env의 ENCRYPTION_KEY 사용)

사용법:
    python scripts/issue_context.py                  # 설정된 스토어
    python scripts/issue_context.py --user-id 7
    python scripts/issue_context.py --generate-key   # 새 ENCRYPTION_KEY 출력
"""
import argparse
import sys
from pathlib import Path

from cryptography.fernet import Fernet

# 프로젝트 루트를 파이썬 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import settings
from app.services.session_service import encode_context


def main():
    parser = argparse.ArgumentParser(description="세션 context 토큰 발급")
    parser.add_argument("--store-hash", type=str, default=None, help="스토어 해시 (기본: BIGCOMMERCE_STORE_HASH)")
    parser.add_argument("--user-id", type=int, default=None, help="BigCommerce 사용자 ID")
    parser.add_argument("--generate-key", action="store_true", help="새 ENCRYPTION_KEY 생성")
    args = parser.parse_args()

    if args.generate_key:
        print(Fernet.generate_key().decode())
        return

    store_hash = args.store_hash or settings.bigcommerce_store_hash
    if not store_hash:
        parser.error("BIGCOMMERCE_STORE_HASH 미설정, --store-hash를 지정하세요")

    try:
        context = encode_context(store_hash, user_id=args.user_id)
    except RuntimeError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    print(context)
    print("\n대시보드: streamlit run dashboard.py → ?context=<위 토큰>", file=sys.stderr)


if __name__ == "__main__":
    main()
