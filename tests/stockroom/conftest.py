import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def stockroom_bed():
    from stockroom.domain import stockroom

    bed = DomainFixture(stockroom)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(stockroom_bed):
    with stockroom_bed.domain_context():
        yield


@pytest.fixture()
def api():
    """An app with the stockroom routers mounted under /api."""
    from stockroom.api import dashboard_router, product_router, store_router
    from stockroom.api.errors import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(store_router, prefix="/api")
    app.include_router(product_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")
    return app


@pytest.fixture()
def client(api):
    return TestClient(api)


@pytest.fixture()
def make_store():
    """Create a store through its command and return the new id."""
    from stockroom.store.management import CreateStore

    def _make(name="Kofi Tech Hub", location="Oxford St, Osu, Accra", manager="Kofi Mensah", status="active"):
        return current_domain.process(
            CreateStore(name=name, location=location, manager=manager, status=status),
            asynchronous=False,
        )

    return _make


@pytest.fixture()
def make_product(make_store):
    """Create a product through its command and return the new id.

    A store is created on demand when no `store_id` is given.
    """
    from stockroom.product.management import CreateProduct

    def _make(store_id=None, name="iPhone 15 Pro", sku="IPH15PRO", category="electronics", price=999.99, **extra):
        return current_domain.process(
            CreateProduct(
                name=name,
                sku=sku,
                category=category,
                price=price,
                store_id=store_id or make_store(),
                **extra,
            ),
            asynchronous=False,
        )

    return _make
