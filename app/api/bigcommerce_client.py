"""
BigCommerce Catalog API 클라이언트
==================================
v3 카탈로그 API 읽기 전용 래퍼 (X-Auth-Token 인증, 재시도 없음)

사용법:
    client = BigCommerceClient(store_hash="abc123", access_token="...")
    category = client.find_category_by_name("Bundle")
    products = client.list_category_products(category.id)
    metafields = client.get_product_metafields(products[0].id)
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from pydantic import ValidationError

from app.constants import BIGCOMMERCE_CATEGORY_LIMIT, BIGCOMMERCE_PAGE_LIMIT
from app.models.catalog import CatalogCategory, CatalogProduct, CatalogVariant, Metafield

logger = logging.getLogger(__name__)


class BigCommerceError(Exception):
    """BigCommerce API 오류"""
    def __init__(self, code: str, message: str, status_code: int = 0):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class BigCommerceClient:
    """BigCommerce v3 Catalog API 클라이언트"""

    DEFAULT_API_URL = "https://api.bigcommerce.com"

    # 엔드포인트 경로
    CATEGORIES_PATH = "/catalog/categories"
    PRODUCTS_PATH = "/catalog/products"

    def __init__(
        self,
        store_hash: str,
        access_token: str,
        api_url: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.store_hash = store_hash
        self.access_token = access_token
        self.base_url = f"{(api_url or self.DEFAULT_API_URL).rstrip('/')}/stores/{store_hash}/v3"
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({
            "X-Auth-Token": access_token,
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

    def close(self):
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        공통 API 요청

        Args:
            method: HTTP 메서드
            path: API 경로 (/catalog/...)
            params: 쿼리 파라미터

        Returns:
            응답 JSON ({"data": ..., "meta": ...})

        Raises:
            BigCommerceError: 네트워크 오류, 2xx 이외 응답, JSON 파싱 실패
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"BigCommerce API {method} {path} params={params}")

        try:
            response = self._session.request(
                method=method.upper(),
                url=url,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise BigCommerceError("TIMEOUT", f"타임아웃: {e}")
        except requests.RequestException as e:
            raise BigCommerceError("NETWORK_ERROR", f"요청 실패: {e}")

        if not 200 <= response.status_code < 300:
            # 오류 본문: {"status": 404, "title": "...", "detail": "..."}
            try:
                error_body = response.json()
            except ValueError:
                error_body = None
            if isinstance(error_body, dict):
                message = error_body.get("title") or error_body.get("detail") or response.text
            else:
                message = response.text
            raise BigCommerceError(str(response.status_code), message, response.status_code)

        try:
            result = response.json()
        except ValueError:
            raise BigCommerceError("INVALID_RESPONSE", f"JSON 파싱 실패: {path}", response.status_code)

        if not isinstance(result, dict):
            raise BigCommerceError("INVALID_RESPONSE", f"예상하지 못한 응답 형식: {path}", response.status_code)
        return result

    def _parse(self, model, data: Any, path: str):
        """응답 data → 모델 (형식 오류는 BigCommerceError로 변환)"""
        try:
            if isinstance(data, list):
                return [model.model_validate(item) for item in data]
            return model.model_validate(data)
        except ValidationError as e:
            raise BigCommerceError("INVALID_RESPONSE", f"응답 형식 오류 ({path}): {e}")

    # ─────────────────────────────────────────────
    # 카테고리
    # ─────────────────────────────────────────────

    def list_categories(self, limit: int = BIGCOMMERCE_CATEGORY_LIMIT) -> List[CatalogCategory]:
        """카테고리 목록 (첫 페이지만)"""
        result = self._request("GET", self.CATEGORIES_PATH, params={"limit": str(limit)})
        return self._parse(CatalogCategory, result.get("data") or [], self.CATEGORIES_PATH)

    def find_category_by_name(self, name: str) -> Optional[CatalogCategory]:
        """
        이름으로 카테고리 검색 (대소문자 무시)

        Returns:
            첫 번째 일치 카테고리 또는 None
        """
        target = name.strip().lower()
        for category in self.list_categories():
            if category.name.strip().lower() == target:
                return category
        return None

    # ─────────────────────────────────────────────
    # 상품
    # ─────────────────────────────────────────────

    def get_products_page(
        self,
        category_id: int,
        page: int,
        limit: int = BIGCOMMERCE_PAGE_LIMIT,
    ) -> Tuple[List[CatalogProduct], int]:
        """
        카테고리 상품 1페이지 조회 (variants 포함)

        Returns:
            (상품 리스트, 전체 페이지 수)
        """
        params = {
            "page": str(page),
            "limit": str(limit),
            "include": "variants",
            "categories:in": str(category_id),
        }
        result = self._request("GET", self.PRODUCTS_PATH, params=params)
        products = self._parse(CatalogProduct, result.get("data") or [], self.PRODUCTS_PATH)

        pagination = (result.get("meta") or {}).get("pagination") or {}
        total_pages = pagination.get("total_pages") or 1
        return products, int(total_pages)

    def list_category_products(
        self,
        category_id: int,
        limit: int = BIGCOMMERCE_PAGE_LIMIT,
    ) -> List[CatalogProduct]:
        """
        카테고리 전체 상품 조회 (total_pages 기준 자동 페이징)

        한 페이지라도 실패하면 BigCommerceError 전파 (부분 결과 없음)
        """
        all_products: List[CatalogProduct] = []
        page = 1

        while True:
            products, total_pages = self.get_products_page(category_id, page, limit)
            all_products.extend(products)
            logger.info(f"  페이지 {page}/{total_pages}: {len(products)}개 로드 (누적 {len(all_products)}개)")

            if page >= total_pages:
                break
            page += 1

        return all_products

    def get_product(self, product_id: int) -> CatalogProduct:
        """상품 단건 조회"""
        path = f"{self.PRODUCTS_PATH}/{product_id}"
        result = self._request("GET", path)
        return self._parse(CatalogProduct, result.get("data"), path)

    def get_variant(self, product_id: int, variant_id: int) -> CatalogVariant:
        """variant 단건 조회"""
        path = f"{self.PRODUCTS_PATH}/{product_id}/variants/{variant_id}"
        result = self._request("GET", path)
        return self._parse(CatalogVariant, result.get("data"), path)

    # ─────────────────────────────────────────────
    # 메타필드
    # ─────────────────────────────────────────────

    def get_product_metafields(self, product_id: int) -> List[Metafield]:
        """상품 메타필드 목록"""
        path = f"{self.PRODUCTS_PATH}/{product_id}/metafields"
        result = self._request("GET", path)
        return self._parse(Metafield, result.get("data") or [], path)

    def get_variant_metafields(self, product_id: int, variant_id: int) -> List[Metafield]:
        """variant 메타필드 목록"""
        path = f"{self.PRODUCTS_PATH}/{product_id}/variants/{variant_id}/metafields"
        result = self._request("GET", path)
        return self._parse(Metafield, result.get("data") or [], path)
