"""
ProductsApi against a stubbed proxy and a stubbed DummyJSON.
"""

import httpx
import pytest

from conftest import list_payload, product_payload
from product_browser.client.api import ProductsApi, ProductsApiError
from product_browser.client.config import get_client_settings

PROXY = "http://localhost:5000/api"


class StubServer:

    def __init__(self, responder):
        self.requests: list[httpx.Request] = []
        self.responder = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def proxy_page(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/products":
        return httpx.Response(200, json={
            "items": [product_payload(1)], "total": 25, "page": int(request.url.params["page"]), "totalPages": 3,
        })
    return httpx.Response(200, json=product_payload(int(request.url.path.rsplit("/", 1)[-1])))


class TestProxyMode:

    @pytest.mark.asyncio
    async def test_get_products_sends_page_and_search(self):
        server = StubServer(proxy_page)
        api = ProductsApi(PROXY, http=server.client())

        page = await api.get_products(2, "phone")

        assert not api.is_dummyjson_direct
        url = server.requests[0].url
        assert url.path == "/api/products"
        assert url.params["page"] == "2"
        assert url.params["search"] == "phone"
        assert page.page == 2
        assert page.total_pages == 3
        assert page.items[0].id == 1

    @pytest.mark.asyncio
    async def test_get_product(self):
        server = StubServer(proxy_page)
        api = ProductsApi(PROXY, http=server.client())

        product = await api.get_product(8)

        assert str(server.requests[0].url) == f"{PROXY}/products/8"
        assert product.id == 8
        assert product.stock == 94

    @pytest.mark.asyncio
    async def test_proxy_error_message_is_surfaced(self):
        server = StubServer(lambda r: httpx.Response(500, json={"error": "Failed to fetch products"}))
        api = ProductsApi(PROXY, http=server.client())

        with pytest.raises(ProductsApiError) as exc_info:
            await api.get_products(1, "")

        assert exc_info.value.message == "Failed to fetch products"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_not_found(self):
        server = StubServer(lambda r: httpx.Response(404, json={"error": "Product not found"}))
        api = ProductsApi(PROXY, http=server.client())

        with pytest.raises(ProductsApiError) as exc_info:
            await api.get_product(999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Product not found"

    @pytest.mark.asyncio
    async def test_error_without_json_body(self):
        server = StubServer(lambda r: httpx.Response(502, text="Bad Gateway"))
        api = ProductsApi(PROXY, http=server.client())

        with pytest.raises(ProductsApiError) as exc_info:
            await api.get_products()

        assert exc_info.value.message == "Request failed with status code 502"

    @pytest.mark.asyncio
    async def test_network_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused")

        api = ProductsApi(PROXY, http=StubServer(refuse).client())

        with pytest.raises(ProductsApiError) as exc_info:
            await api.get_product(1)

        assert exc_info.value.message == "Network error"
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_invalid_payload(self):
        server = StubServer(lambda r: httpx.Response(200, json={"items": "nope"}))
        api = ProductsApi(PROXY, http=server.client())

        with pytest.raises(ProductsApiError):
            await api.get_products()


class TestDummyJsonDirectMode:

    @pytest.mark.asyncio
    async def test_search_is_normalized_locally(self):
        server = StubServer(lambda r: httpx.Response(200, json=list_payload(total=25, skip=12)))
        api = ProductsApi("https://dummyjson.com", http=server.client())

        page = await api.get_products(2, "phone")

        assert api.is_dummyjson_direct
        url = server.requests[0].url
        assert url.path == "/products/search"
        assert url.params["q"] == "phone"
        assert url.params["limit"] == "12"
        assert url.params["skip"] == "12"
        assert page.page == 2
        assert page.total_pages == 3
        assert len(page.items) == 2

    @pytest.mark.asyncio
    async def test_plain_listing(self):
        server = StubServer(lambda r: httpx.Response(200, json=list_payload(total=0, products=[])))
        api = ProductsApi("https://dummyjson.com/", http=server.client())

        page = await api.get_products()

        assert server.requests[0].url.path == "/products"
        assert "q" not in server.requests[0].url.params
        assert page.total_pages == 0


def test_base_url_comes_from_environment(monkeypatch):
    monkeypatch.setenv("PRODUCT_BROWSER_API_BASE_URL", "http://proxy.internal:8080/api/")
    get_client_settings.cache_clear()
    try:
        api = ProductsApi(http=httpx.AsyncClient())
        assert api.base_url == "http://proxy.internal:8080/api"
    finally:
        get_client_settings.cache_clear()


def test_base_url_default(monkeypatch):
    monkeypatch.delenv("PRODUCT_BROWSER_API_BASE_URL", raising=False)
    get_client_settings.cache_clear()
    try:
        assert ProductsApi(http=httpx.AsyncClient()).base_url == "http://localhost:5000/api"
    finally:
        get_client_settings.cache_clear()
