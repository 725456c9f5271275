"""Pydantic request/response schemas for the Stockroom API.

Fields are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stockroom.product.product import ProductCategory, StockStatus
from stockroom.store.store import StoreStatus

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Store Request Schemas ---


class CreateStoreRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Kofi Tech Hub",
                    "location": "Oxford St, Osu, Accra",
                    "manager": "Kofi Mensah",
                    "status": "active",
                }
            ]
        },
    )

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    manager: str = Field(..., min_length=1, max_length=255)
    status: StoreStatus = StoreStatus.ACTIVE


class UpdateStoreRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = Field(None, min_length=1, max_length=255)
    manager: str | None = Field(None, min_length=1, max_length=255)
    status: StoreStatus | None = None


# --- Product Request Schemas ---


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "MacBook Pro 16-inch",
                    "sku": "MBP16-2024",
                    "category": "electronics",
                    "price": 2499.99,
                    "quantity": 12,
                    "minStock": 5,
                    "storeId": "6f1c2a0e-3d4b-4e8a-9c41-2b7f0d5e8a13",
                }
            ]
        },
    )

    name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=100)
    category: ProductCategory
    price: float = Field(..., ge=0)
    quantity: int = Field(0, ge=0)
    min_stock: int = Field(10, ge=0)
    store_id: str = Field(..., min_length=1)


class UpdateProductRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    sku: str | None = Field(None, min_length=1, max_length=100)
    category: ProductCategory | None = None
    price: float | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)
    min_stock: int | None = Field(None, ge=0)
    store_id: str | None = Field(None, min_length=1)


# --- Response Schemas ---


class ProductSummaryResponse(CamelModel):
    total: int
    low_stock: int
    out_of_stock: int


class StoreResponse(CamelModel):
    id: str
    name: str
    location: str
    manager: str
    status: StoreStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StoreDetailResponse(StoreResponse):
    product_summary: ProductSummaryResponse


class ProductResponse(CamelModel):
    id: str
    name: str
    sku: str
    category: ProductCategory
    price: float
    quantity: int
    min_stock: int
    status: StockStatus
    store_id: str
    store_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LowStockProductResponse(CamelModel):
    id: str
    name: str
    sku: str
    quantity: int
    min_stock: int
    status: StockStatus
    store_name: str | None = None


class DashboardMetricsResponse(CamelModel):
    total_stores: int
    active_stores: int
    total_products: int
    inventory_value: float
    low_stock_count: int
    out_of_stock_count: int
    category_counts: dict[str, int]
    low_stock_products: list[LowStockProductResponse]


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class LinksResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_: str = Field(..., alias="self")
    first: str
    prev: str | None = None
    next: str | None = None
    last: str


class DataResponse(BaseModel, Generic[T]):
    data: T


class ListResponse(BaseModel, Generic[T]):
    data: list[T]
    pagination: PaginationResponse
    links: LinksResponse


# --- Error Schemas ---


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: list[ErrorDetail] = []


class ErrorResponse(BaseModel):
    error: ErrorBody
