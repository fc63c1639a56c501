# product_browser/core/lifespan.py
from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI

from product_browser.core.config import get_settings
from product_browser.domain.repositories.catalog_repo import CatalogRepo
from product_browser.domain.repositories.product_cache_repo import ProductCacheRepo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # One pooled client for every upstream call; timeouts are httpx defaults
    http_client = httpx.AsyncClient(base_url=settings.UPSTREAM_BASE_URL)
    app.state.http_client = http_client
    app.state.catalog_repo = CatalogRepo(http_client)
    app.state.product_cache = ProductCacheRepo(
        ttl=settings.product_cache_ttl,
        maxsize=settings.product_cache_maxsize,
    )
    logger.info(
        "Upstream catalog at %s, product cache ttl=%ss maxsize=%s",
        settings.UPSTREAM_BASE_URL, settings.product_cache_ttl, settings.product_cache_maxsize,
    )

    # Application runs
    yield

    # --- Shutdown ---
    await http_client.aclose()
    logger.info("Upstream HTTP client closed")
