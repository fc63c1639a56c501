# product_browser/api/v1/schemas/products.py
from pydantic import BaseModel


class ErrorOut(BaseModel):
    error: str


# OpenAPI documentation for the error bodies of the products routes
LIST_ERRORS = {500: {"model": ErrorOut, "description": "Upstream catalog failure"}}
DETAIL_ERRORS = {
    404: {"model": ErrorOut, "description": "Unknown product id"},
    500: {"model": ErrorOut, "description": "Upstream catalog failure"},
}
