# product_browser/api/deps.py
from fastapi import Request
from product_browser.domain.repositories.catalog_repo import CatalogRepo
from product_browser.domain.repositories.product_cache_repo import ProductCacheRepo

# Both collaborators are built once in the lifespan and stored on app.state.
# Tests swap them through app.dependency_overrides.

def catalog_repo_dep(request: Request) -> CatalogRepo:
    return request.app.state.catalog_repo

def product_cache_dep(request: Request) -> ProductCacheRepo:
    return request.app.state.product_cache
