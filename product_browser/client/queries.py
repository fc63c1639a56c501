# product_browser/client/queries.py
"""
The two queries of the browsing client, bound to their cache keys and freshness windows.
"""
from product_browser.client.api import ProductsApi
from product_browser.client.constants import PRODUCT_RETRY, PRODUCT_STALE_TIME, PRODUCTS_RETRY, PRODUCTS_STALE_TIME
from product_browser.client.query_cache import QueryCache
from product_browser.domain.models.product import CatalogItem, ProductPage


def products_key(page: int, search: str) -> tuple:
    return ("products", page, search)


def product_key(product_id: int) -> tuple:
    return ("product", product_id)


async def fetch_products(
    cache: QueryCache,
    api: ProductsApi,
    *,
    page: int,
    search: str,
    force: bool = False,
    retry: int = PRODUCTS_RETRY,
) -> ProductPage:
    return await cache.fetch(
        products_key(page, search),
        lambda: api.get_products(page, search),
        stale_time=PRODUCTS_STALE_TIME,
        retry=retry,
        force=force,
    )


async def fetch_product(
    cache: QueryCache,
    api: ProductsApi,
    product_id: int,
    *,
    force: bool = False,
    retry: int = PRODUCT_RETRY,
) -> CatalogItem:
    return await cache.fetch(
        product_key(product_id),
        lambda: api.get_product(product_id),
        stale_time=PRODUCT_STALE_TIME,
        retry=retry,
        force=force,
    )
