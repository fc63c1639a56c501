# product_browser/domain/services/catalog_svc.py
import logging
import math
from typing import Optional

from product_browser.core.errors import ProductDetailsFetchError, ProductNotFound, ProductsFetchError
from product_browser.domain.models.product import CatalogItem, ProductPage
from product_browser.domain.repositories.catalog_repo import CatalogRepo, UpstreamError
from product_browser.domain.repositories.product_cache_repo import ProductCacheRepo
from product_browser.domain.services.constants import PAGE_SIZE

logger = logging.getLogger(__name__)


def skip_for_page(page: int, page_size: int = PAGE_SIZE) -> int:
    """
    Number of items to skip for a 1-based page.
    Pages <= 0 are not rejected: the result is simply negative and forwarded as is.
    """
    return (page - 1) * page_size


def total_pages_for(total: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(total / page_size)


async def list_products(repo: CatalogRepo, *, search: Optional[str] = None, page: int = 1) -> ProductPage:
    """
    One page of products, through the upstream search endpoint when ``search`` is non-empty
    and the plain listing otherwise. Never cached.
    Pagination metadata is recomputed here; upstream only reports skip/limit/total.
    """
    logger.info("Getting products - Search: %s, Page: %s", search, page)
    skip = skip_for_page(page)

    try:
        if search:
            upstream = await repo.search_products(search, limit=PAGE_SIZE, skip=skip)
        else:
            upstream = await repo.list_products(limit=PAGE_SIZE, skip=skip)
    except UpstreamError as e:
        logger.error("Error fetching products: %s", e, exc_info=True)
        raise ProductsFetchError() from e

    logger.info("Successfully retrieved %s products", len(upstream.products))
    return ProductPage(
        items=upstream.products,
        total=upstream.total,
        page=page,
        total_pages=total_pages_for(upstream.total),
    )


async def get_product_cached(repo: CatalogRepo, cache: ProductCacheRepo, product_id: int) -> CatalogItem:
    """
    Read-through lookup: cache → upstream → cache.
    - fresh hit: no upstream call
    - upstream 404: ProductNotFound, nothing cached
    - any other failure: ProductDetailsFetchError
    Concurrent misses for the same id each call upstream; the last write wins.
    """
    logger.info("Getting product with ID: %s", product_id)

    if (cached := cache.get(product_id)) is not None:
        logger.info("Returning cached product %s", product_id)
        return cached

    try:
        product = await repo.get_product(product_id)
    except UpstreamError as e:
        if e.not_found:
            logger.warning("Product %s not found", product_id)
            raise ProductNotFound() from e
        logger.error("Error fetching product %s: %s", product_id, e, exc_info=True)
        raise ProductDetailsFetchError() from e

    cache.set(product_id, product)
    logger.info("Successfully retrieved and cached product %s", product_id)
    return product
