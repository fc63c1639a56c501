# product_browser/client/api.py
from __future__ import annotations
from typing import Any, Optional
import logging

import httpx

from product_browser.client.config import get_client_settings
from product_browser.domain.models.product import CatalogItem, ProductPage, UpstreamProductList
from product_browser.domain.services.catalog_svc import skip_for_page, total_pages_for
from product_browser.domain.services.constants import PAGE_SIZE

logger = logging.getLogger(__name__)


class ProductsApiError(Exception):
    """A request to the products API failed. ``message`` is fit for display."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ProductsApi:
    """
    Browsing-client side of the products API.

    Talks to the proxy (``GET {base}/products``, ``GET {base}/products/{id}``).
    When the base URL is DummyJSON itself, the same paging and normalization
    the proxy does is done here instead.
    """

    def __init__(self, base_url: Optional[str] = None, *, http: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or get_client_settings().api_base_url).rstrip("/")
        self.is_dummyjson_direct = "dummyjson.com" in self.base_url
        self.http = http or httpx.AsyncClient()

    async def get_products(self, page: int = 1, search: str = "") -> ProductPage:
        if self.is_dummyjson_direct:
            skip = skip_for_page(page)
            if search:
                url, params = f"{self.base_url}/products/search", {"q": search, "limit": PAGE_SIZE, "skip": skip}
            else:
                url, params = f"{self.base_url}/products", {"limit": PAGE_SIZE, "skip": skip}
            data = _parse(UpstreamProductList, await self._get_json(url, params))
            return ProductPage(
                items=data.products,
                total=data.total,
                page=page,
                total_pages=total_pages_for(data.total),
            )

        data = await self._get_json(f"{self.base_url}/products", {"page": page, "search": search})
        return _parse(ProductPage, data)

    async def get_product(self, product_id: int) -> CatalogItem:
        data = await self._get_json(f"{self.base_url}/products/{product_id}")
        return _parse(CatalogItem, data)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        try:
            response = await self.http.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ProductsApiError(_error_message(e.response), status_code=status) from e
        except httpx.HTTPError as e:
            logger.warning("Products API unreachable at %s: %r", url, e)
            raise ProductsApiError("Network error") from e
        except ValueError as e:
            raise ProductsApiError("Invalid response from products API") from e


def _parse(model, data: Any):
    try:
        return model.model_validate(data)
    except ValueError as e:
        logger.warning("Unexpected %s payload: %s", model.__name__, e)
        raise ProductsApiError("Invalid response from products API") from e


def _error_message(response: httpx.Response) -> str:
    # The proxy answers errors as {"error": "..."}
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"Request failed with status code {response.status_code}"
