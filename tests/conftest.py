"""
Shared fixtures: a fake clock, canned DummyJSON payloads and an upstream stub
served through httpx.MockTransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from product_browser.api.deps import catalog_repo_dep, product_cache_dep
from product_browser.domain.repositories.catalog_repo import CatalogRepo
from product_browser.domain.repositories.product_cache_repo import ProductCacheRepo
from product_browser.main import create_app

UPSTREAM = "https://dummyjson.com"


class FakeClock:
    """Monotonic timer the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def product_payload(product_id: int = 1, **overrides) -> dict:
    payload = {
        "id": product_id,
        "title": f"Product {product_id}",
        "description": "An apple mobile which is nothing like apple",
        "price": 549,
        "discountPercentage": 12.96,
        "rating": 4.69,
        "stock": 94,
        "brand": "Apple",
        "category": "smartphones",
        "thumbnail": f"https://cdn.dummyjson.com/products/{product_id}/thumbnail.jpg",
        "images": [f"https://cdn.dummyjson.com/products/{product_id}/1.jpg"],
        "tags": ["extra", "fields", "are", "dropped"],
    }
    payload.update(overrides)
    return payload


def list_payload(products=None, total: int = 100, skip: int = 0, limit: int = 12) -> dict:
    return {
        "products": products if products is not None else [product_payload(1), product_payload(2)],
        "total": total,
        "skip": skip,
        "limit": limit,
    }


class UpstreamStub:
    """Serves canned responses by path and records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, object] = {}

    def reply(self, path: str, json=None, status: int = 200, text: str | None = None) -> None:
        self.routes[path] = (status, json, text)

    def fail(self, path: str, exc: Exception) -> None:
        self.routes[path] = exc

    def calls_to(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": f"Product with id '{request.url.path}' not found"})
        if isinstance(route, Exception):
            raise route
        status, body, text = route
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=body)

    def client(self, base_url: str = UPSTREAM) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler), base_url=base_url)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def product_cache(clock):
    return ProductCacheRepo(ttl=60, timer=clock)


@pytest.fixture
def app(upstream, product_cache):
    application = create_app()
    repo = CatalogRepo(upstream.client())
    application.dependency_overrides[catalog_repo_dep] = lambda: repo
    application.dependency_overrides[product_cache_dep] = lambda: product_cache
    return application


@pytest.fixture
def client(app):
    return TestClient(app)
