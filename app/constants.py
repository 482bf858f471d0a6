"""비즈니스 상수 - 매직넘버 중앙 관리"""

# 번들 메타필드 (스토어 전체에서 공유하는 스키마, 값 변경 금지)
BUNDLE_METAFIELD_NAMESPACE = "bundle"
IS_BUNDLE_KEY = "is_bundle"
IS_BUNDLE_TRUE = "true"  # 문자열 리터럴 비교
LINKED_PRODUCTS_KEY = "linked_product_ids"

# BigCommerce API
BIGCOMMERCE_PAGE_LIMIT = 250  # 페이지당 최대 항목 수
BIGCOMMERCE_CATEGORY_LIMIT = 250

# 구성품 표시
VARIANT_FALLBACK_LABEL = "Variant"  # 옵션값이 없는 variant
VARIANT_LABEL_SEPARATOR = " - "
UNKNOWN_COMPONENT_NAME = "Unknown Component"  # 조회 실패 구성품
UNKNOWN_COMPONENT_SKU = "N/A"

# 기본 구성 수량 (linked_product_ids 항목에 quantity가 없을 때)
DEFAULT_COMPONENT_QUANTITY = 1

# API 응답 메시지
MSG_UNAUTHORIZED = "Unauthorized"
MSG_METHOD_NOT_ALLOWED = "Method not allowed"
MSG_BUNDLE_STOCK_ERROR = "Error fetching bundle stock"
