# product_browser/domain/repositories/catalog_repo.py

from __future__ import annotations
from typing import Any, Optional
import logging

import httpx

from product_browser.domain.models.product import CatalogItem, UpstreamProductList

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """
    Raised when the upstream catalog cannot be reached, answers with a non-success
    status, or sends a body that does not fit our models.
    ``status_code`` is set when upstream did answer.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class CatalogRepo:
    """
    Read-only adapter over the upstream catalog HTTP service.
    No business logic here: build the request, check the status, parse into models.
    The httpx client is expected to carry the upstream ``base_url``.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def list_products(self, *, limit: int, skip: int) -> UpstreamProductList:
        data = await self._get_json("/products", params={"limit": limit, "skip": skip})
        return self._parse(UpstreamProductList, data)

    async def search_products(self, q: str, *, limit: int, skip: int) -> UpstreamProductList:
        data = await self._get_json("/products/search", params={"q": q, "limit": limit, "skip": skip})
        return self._parse(UpstreamProductList, data)

    async def get_product(self, product_id: int) -> CatalogItem:
        data = await self._get_json(f"/products/{product_id}")
        return self._parse(CatalogItem, data)

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        try:
            response = await self.http.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"GET {e.request.url} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"GET {path} failed: {e!r}") from e
        except ValueError as e:
            # body is not JSON
            raise UpstreamError(f"GET {path} returned an unreadable body: {e}") from e

    @staticmethod
    def _parse(model, data: Any):
        try:
            return model.model_validate(data)
        except ValueError as e:
            # pydantic.ValidationError is a ValueError
            logger.warning("Unexpected upstream shape for %s: %s", model.__name__, e)
            raise UpstreamError(f"Unexpected upstream shape for {model.__name__}") from e
