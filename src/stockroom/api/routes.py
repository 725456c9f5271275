"""FastAPI endpoints for stores, products and the dashboard.

Reads go straight to the repositories; writes are translated into domain
commands and processed synchronously.
"""

from fastapi import APIRouter, Query, Request, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from stockroom.api.schemas import (
    CreateProductRequest,
    CreateStoreRequest,
    DashboardMetricsResponse,
    DataResponse,
    LinksResponse,
    ListResponse,
    LowStockProductResponse,
    PaginationResponse,
    ProductResponse,
    ProductSummaryResponse,
    StoreDetailResponse,
    StoreResponse,
    UpdateProductRequest,
    UpdateStoreRequest,
)
from stockroom.dashboard.metrics import collect_dashboard_metrics
from stockroom.exceptions import NotFoundError
from stockroom.product.listing import ProductQuery, list_products
from stockroom.product.management import CreateProduct, DeleteProduct, UpdateProduct
from stockroom.product.product import Product, ProductCategory, StockStatus
from stockroom.shared.listing import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, Page
from stockroom.shared.pagination import Pagination, build_links
from stockroom.store.listing import StoreQuery, list_stores
from stockroom.store.management import CreateStore, DeleteStore, UpdateStore
from stockroom.store.store import Store, StoreStatus
from stockroom.store.summary import summarize_products

store_router = APIRouter(prefix="/stores", tags=["stores"])
product_router = APIRouter(prefix="/products", tags=["products"])
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _store_response(store) -> StoreResponse:
    return StoreResponse(
        id=str(store.id),
        name=store.name,
        location=store.location,
        manager=store.manager,
        status=store.status,
        created_at=store.created_at,
        updated_at=store.updated_at,
    )


def _product_response(product, store_name=None) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        sku=product.sku,
        category=product.category,
        price=product.price,
        quantity=product.quantity,
        min_stock=product.min_stock,
        status=product.status,
        store_id=str(product.store_id),
        store_name=store_name,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _list_response(request: Request, page: Page, rows: list) -> ListResponse:
    pagination = Pagination(page=page.page, limit=page.limit, total=page.total)
    links = build_links(request.url.path, page.page, page.limit, pagination.total_pages)
    return ListResponse(
        data=rows,
        pagination=PaginationResponse(**pagination.as_dict()),
        links=LinksResponse.model_validate(links),
    )


def _location(request: Request, resource_id: str) -> str:
    return f"{request.url.path.rstrip('/')}/{resource_id}"


def _get_store(store_id: str):
    try:
        return current_domain.repository_for(Store).get(store_id)
    except ObjectNotFoundError as exc:
        raise NotFoundError("Store not found") from exc


def _get_product(product_id: str):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError as exc:
        raise NotFoundError("Product not found") from exc


def _store_name(store_id) -> str | None:
    return current_domain.repository_for(Store).names_for([store_id]).get(str(store_id))


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------
@store_router.get("", response_model=ListResponse[StoreResponse])
async def get_stores(
    request: Request,
    q: str | None = None,
    status: StoreStatus | None = None,
    sort: str | None = None,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
):
    query = StoreQuery(q=q, status=status, sort=sort, page=page, limit=limit)
    result = list_stores(current_domain.repository_for(Store), query)
    return _list_response(request, result, [_store_response(store) for store in result.items])


@store_router.get("/{store_id}", response_model=DataResponse[StoreDetailResponse])
async def get_store(store_id: str):
    store = _get_store(store_id)
    summary = summarize_products(current_domain.repository_for(Product), store.id)
    detail = StoreDetailResponse(
        **_store_response(store).model_dump(),
        product_summary=ProductSummaryResponse(
            total=summary.total,
            low_stock=summary.low_stock,
            out_of_stock=summary.out_of_stock,
        ),
    )
    return DataResponse(data=detail)


@store_router.post("", status_code=201, response_model=DataResponse[StoreResponse])
async def create_store(body: CreateStoreRequest, request: Request, response: Response):
    command = CreateStore(
        name=body.name,
        location=body.location,
        manager=body.manager,
        status=body.status.value,
    )
    store_id = current_domain.process(command, asynchronous=False)
    response.headers["Location"] = _location(request, store_id)
    return DataResponse(data=_store_response(_get_store(store_id)))


@store_router.patch("/{store_id}", response_model=DataResponse[StoreResponse])
async def update_store(store_id: str, body: UpdateStoreRequest):
    command = UpdateStore(
        store_id=store_id,
        name=body.name,
        location=body.location,
        manager=body.manager,
        status=body.status.value if body.status else None,
    )
    current_domain.process(command, asynchronous=False)
    return DataResponse(data=_store_response(_get_store(store_id)))


@store_router.delete("/{store_id}", status_code=204)
async def delete_store(store_id: str) -> Response:
    current_domain.process(DeleteStore(store_id=store_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@product_router.get("", response_model=ListResponse[ProductResponse])
async def get_products(
    request: Request,
    q: str | None = None,
    category: ProductCategory | None = None,
    status: StockStatus | None = None,
    store_id: str | None = Query(None, alias="storeId"),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    sort: str | None = None,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
):
    query = ProductQuery(
        q=q,
        category=category,
        status=status,
        store_id=store_id,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
        page=page,
        limit=limit,
    )
    store_repository = current_domain.repository_for(Store)
    result = list_products(current_domain.repository_for(Product), store_repository, query)
    store_names = store_repository.names_for(product.store_id for product in result.items)
    rows = [_product_response(product, store_names.get(str(product.store_id))) for product in result.items]
    return _list_response(request, result, rows)


@product_router.get("/{product_id}", response_model=DataResponse[ProductResponse])
async def get_product(product_id: str):
    product = _get_product(product_id)
    return DataResponse(data=_product_response(product, _store_name(product.store_id)))


@product_router.post("", status_code=201, response_model=DataResponse[ProductResponse])
async def create_product(body: CreateProductRequest, request: Request, response: Response):
    command = CreateProduct(
        name=body.name,
        sku=body.sku,
        category=body.category.value,
        price=body.price,
        quantity=body.quantity,
        min_stock=body.min_stock,
        store_id=body.store_id,
    )
    product_id = current_domain.process(command, asynchronous=False)
    response.headers["Location"] = _location(request, product_id)
    product = _get_product(product_id)
    return DataResponse(data=_product_response(product, _store_name(product.store_id)))


@product_router.patch("/{product_id}", response_model=DataResponse[ProductResponse])
async def update_product(product_id: str, body: UpdateProductRequest):
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        sku=body.sku,
        category=body.category.value if body.category else None,
        price=body.price,
        quantity=body.quantity,
        min_stock=body.min_stock,
        store_id=body.store_id,
    )
    current_domain.process(command, asynchronous=False)
    product = _get_product(product_id)
    return DataResponse(data=_product_response(product, _store_name(product.store_id)))


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
@dashboard_router.get("/metrics", response_model=DataResponse[DashboardMetricsResponse])
async def get_dashboard_metrics():
    metrics = collect_dashboard_metrics(
        current_domain.repository_for(Store),
        current_domain.repository_for(Product),
    )
    return DataResponse(
        data=DashboardMetricsResponse(
            total_stores=metrics.total_stores,
            active_stores=metrics.active_stores,
            total_products=metrics.total_products,
            inventory_value=metrics.inventory_value,
            low_stock_count=metrics.low_stock_count,
            out_of_stock_count=metrics.out_of_stock_count,
            category_counts=metrics.category_counts,
            low_stock_products=[
                LowStockProductResponse(
                    id=entry.id,
                    name=entry.name,
                    sku=entry.sku,
                    quantity=entry.quantity,
                    min_stock=entry.min_stock,
                    status=entry.status,
                    store_name=entry.store_name,
                )
                for entry in metrics.low_stock_products
            ],
        )
    )
