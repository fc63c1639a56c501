# product_browser/api/v1/routers/products.py

from fastapi import APIRouter, Depends, Query
from typing import Optional
import time

from product_browser.api.deps import catalog_repo_dep, product_cache_dep
from product_browser.api.v1.schemas.products import DETAIL_ERRORS, LIST_ERRORS
from product_browser.domain.models.product import CatalogItem, ProductPage
from product_browser.domain.repositories.catalog_repo import CatalogRepo
from product_browser.domain.repositories.product_cache_repo import ProductCacheRepo
from product_browser.domain.services.catalog_svc import get_product_cached, list_products

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", response_model=ProductPage, responses=LIST_ERRORS)
async def get_products(
    search: Optional[str] = Query(None, description="Free-text search; empty means plain listing"),
    # no lower bound: 0 and negatives are forwarded arithmetically
    page: int = Query(1, description="1-based page number"),
    repo: CatalogRepo = Depends(catalog_repo_dep),
):
    """
    Paginated product list (12 per page), optionally filtered by a search term.
    Always reaches upstream; list results are not cached.
    """
    start_time = time.perf_counter()
    result = await list_products(repo, search=search, page=page)
    elapsed_time = time.perf_counter() - start_time
    logger.info(
        "Response: get_products page=%s/%s total=%s elapsed_time=%.4fs",
        result.page, result.total_pages, result.total, elapsed_time,
    )
    return result


@router.get("/products/{product_id}", response_model=CatalogItem, responses=DETAIL_ERRORS)
async def get_product(
    product_id: int,
    repo: CatalogRepo = Depends(catalog_repo_dep),
    cache: ProductCacheRepo = Depends(product_cache_dep),
):
    """
    Single product, served from the one-minute cache when possible.
    """
    return await get_product_cached(repo, cache, product_id)
