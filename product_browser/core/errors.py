# product_browser/core/errors.py
"""
Errors surfaced to API callers.

``message`` is what the caller sees, so it never carries upstream details.
The underlying cause is chained (``raise ... from exc``) and logged server-side.
"""


class CatalogError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ProductsFetchError(CatalogError):
    default_message = "Failed to fetch products"


class ProductDetailsFetchError(CatalogError):
    default_message = "Failed to fetch product details"


class ProductNotFound(CatalogError):
    status_code = 404
    default_message = "Product not found"
