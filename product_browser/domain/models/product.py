from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, List, Optional


class _UpstreamModel(BaseModel):
    """
    Base for models parsed from upstream JSON.
    Field names are matched case-insensitively (``Title`` and ``title`` both land on ``title``),
    unknown fields are dropped.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")  # immutable

    @model_validator(mode="before")
    @classmethod
    def _fold_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        names = {(f.alias or name).lower(): (f.alias or name) for name, f in cls.model_fields.items()}
        return {names.get(str(k).lower(), k): v for k, v in data.items()}


class CatalogItemSummary(_UpstreamModel):
    """List-view subset of a catalog item."""
    id: int
    title: str = ""
    description: str = ""
    price: float = 0
    thumbnail: str = ""
    rating: float = Field(default=0, ge=0, le=5)
    brand: str = ""
    category: str = ""


class CatalogItem(CatalogItemSummary):
    """Full item as returned by the detail endpoint."""
    images: Optional[List[str]] = None
    stock: Optional[int] = None
    discount_percentage: Optional[float] = Field(default=None, alias="discountPercentage")


class UpstreamProductList(_UpstreamModel):
    """Envelope of upstream list/search responses. Upstream reports skip/limit/total, never pages."""
    products: List[CatalogItemSummary] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0


class ProductPage(_UpstreamModel):
    items: List[CatalogItemSummary]
    total: int
    page: int
    total_pages: int = Field(alias="totalPages")
