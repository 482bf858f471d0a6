"""서비스 모듈"""
from app.services.bundle_resolver import BundleStockService, read_linked_components
from app.services.bundle_view import filter_bundles, limiting_component_indexes, limiting_minimum
from app.services.catalog_service import fetch_category_products
from app.services.session_service import StoreSession, encode_context, resolve_session

__all__ = [
    'BundleStockService',
    'read_linked_components',
    'filter_bundles',
    'limiting_component_indexes',
    'limiting_minimum',
    'fetch_category_products',
    'StoreSession',
    'encode_context',
    'resolve_session',
]
