# Fixed page size for list/search queries (not configurable at runtime)
PAGE_SIZE = 12

# Key namespace for the product detail cache
PRODUCT_CACHE_PREFIX = "product"
