"""Application tests for the list engine over stores and products."""

import pytest
from protean import current_domain
from stockroom.product.listing import ProductQuery, list_products
from stockroom.product.product import Product, ProductCategory, StockStatus
from stockroom.store.listing import StoreQuery, list_stores
from stockroom.store.store import Store, StoreStatus


def _products(query):
    return list_products(current_domain.repository_for(Product), current_domain.repository_for(Store), query)


def _stores(query):
    return list_stores(current_domain.repository_for(Store), query)


@pytest.fixture()
def catalogue(make_store, make_product):
    """A small assortment across two stores."""
    tech = make_store(name="Kofi Tech Hub")
    fashion = make_store(name="Kantamanto Fashion")
    make_product(tech, name="MacBook Pro", sku="MBP16-2024", price=2499.99, quantity=15, min_stock=5)
    make_product(tech, name="iPhone 15 Pro", sku="IPH15PRO", price=999.99, quantity=42, min_stock=10)
    make_product(tech, name="AirPods Pro", sku="APP2-BLK", price=249.99, quantity=3, min_stock=15)
    make_product(tech, name="iPad Air", sku="IPAD-AIR5", price=599.99, quantity=0, min_stock=8)
    make_product(fashion, name="Denim Jacket", sku="JKT-DNM-M", category="clothing", price=89.99, quantity=60)
    make_product(fashion, name="Winter Parka", sku="PRKA-XL-NVY", category="clothing", price=259.99, quantity=0)
    return {"tech": tech, "fashion": fashion}


class TestProductFilters:
    def test_no_filters_returns_everything_sorted_by_name(self, catalogue):
        page = _products(ProductQuery())
        assert page.total == 6
        names = [product.name for product in page.items]
        assert names == sorted(names)

    def test_search_matches_name(self, catalogue):
        page = _products(ProductQuery(q="Pro"))
        assert {product.sku for product in page.items} == {"MBP16-2024", "IPH15PRO", "APP2-BLK"}

    def test_search_matches_sku(self, catalogue):
        page = _products(ProductQuery(q="DNM"))
        assert [product.name for product in page.items] == ["Denim Jacket"]

    def test_search_ignores_case(self, catalogue):
        page = _products(ProductQuery(q="ipad"))
        assert [product.sku for product in page.items] == ["IPAD-AIR5"]

    def test_search_without_matches(self, catalogue):
        page = _products(ProductQuery(q="zzzz-nothing"))
        assert page.total == 0
        assert page.items == []

    def test_category_filter(self, catalogue):
        page = _products(ProductQuery(category=ProductCategory.CLOTHING))
        assert page.total == 2

    def test_status_filter(self, catalogue):
        page = _products(ProductQuery(status=StockStatus.OUT_OF_STOCK))
        assert {product.sku for product in page.items} == {"IPAD-AIR5", "PRKA-XL-NVY"}

    def test_store_filter(self, catalogue):
        page = _products(ProductQuery(store_id=catalogue["fashion"]))
        assert {product.sku for product in page.items} == {"JKT-DNM-M", "PRKA-XL-NVY"}

    def test_price_range_is_inclusive(self, catalogue):
        page = _products(ProductQuery(min_price=249.99, max_price=999.99))
        assert {product.sku for product in page.items} == {"IPH15PRO", "APP2-BLK", "IPAD-AIR5", "PRKA-XL-NVY"}

    def test_price_bounds_are_independent(self, catalogue):
        assert _products(ProductQuery(min_price=1000)).total == 1
        assert _products(ProductQuery(max_price=100)).total == 1

    def test_filters_are_combined(self, catalogue):
        page = _products(ProductQuery(q="Pro", store_id=catalogue["tech"], status=StockStatus.IN_STOCK))
        assert {product.sku for product in page.items} == {"MBP16-2024", "IPH15PRO"}


class TestProductSorting:
    def test_sort_by_price_descending(self, catalogue):
        prices = [product.price for product in _products(ProductQuery(sort="price,desc")).items]
        assert prices == sorted(prices, reverse=True)

    def test_sort_by_quantity_ascending(self, catalogue):
        quantities = [product.quantity for product in _products(ProductQuery(sort="quantity,asc")).items]
        assert quantities == sorted(quantities)

    def test_unknown_sort_field_falls_back_to_name(self, catalogue):
        names = [product.name for product in _products(ProductQuery(sort="supplier,asc")).items]
        assert names == sorted(names)

    def test_sort_by_store_name(self, catalogue):
        page = _products(ProductQuery(sort="storeName,asc"))
        assert page.total == 6
        assert [str(product.store_id) for product in page.items] == [catalogue["fashion"]] * 2 + [catalogue["tech"]] * 4

    def test_sort_by_store_name_descending(self, catalogue):
        page = _products(ProductQuery(sort="storeName,desc"))
        assert [str(product.store_id) for product in page.items] == [catalogue["tech"]] * 4 + [catalogue["fashion"]] * 2

    def test_sort_by_store_name_respects_filters_and_window(self, catalogue):
        page = _products(ProductQuery(sort="storeName,asc", status=StockStatus.OUT_OF_STOCK, page=2, limit=1))
        assert page.total == 2
        assert [product.sku for product in page.items] == ["IPAD-AIR5"]


class TestPaginationWindow:
    @pytest.fixture()
    def many_products(self, make_store, make_product):
        store_id = make_store()
        for index in range(25):
            make_product(store_id, name=f"Item {index:02d}", sku=f"SKU-{index:02d}", quantity=index)

    def test_first_page(self, many_products):
        page = _products(ProductQuery(page=1, limit=10))
        assert page.total == 25
        assert [product.sku for product in page.items] == [f"SKU-{index:02d}" for index in range(10)]

    def test_last_partial_page(self, many_products):
        page = _products(ProductQuery(page=3, limit=10))
        assert page.total == 25
        assert [product.sku for product in page.items] == [f"SKU-{index:02d}" for index in range(20, 25)]

    def test_page_past_the_end_is_empty(self, many_products):
        page = _products(ProductQuery(page=4, limit=10))
        assert page.total == 25
        assert page.items == []

    @pytest.mark.parametrize("page, limit", [(1, 1), (2, 5), (1, 100), (7, 3)])
    def test_total_does_not_depend_on_window(self, many_products, page, limit):
        assert _products(ProductQuery(page=page, limit=limit)).total == 25

    def test_repeated_queries_return_the_same_rows(self, many_products):
        query = ProductQuery(q="Item", sort="quantity,desc", page=2, limit=7)
        first = [product.id for product in _products(query).items]
        second = [product.id for product in _products(query).items]
        assert first == second


class TestStoreListing:
    @pytest.fixture()
    def stores(self, make_store):
        make_store(name="Kofi Tech Hub", location="Oxford St, Osu, Accra", manager="Kofi Mensah")
        make_store(name="Ama's Furniture & Home", location="Ring Rd Central, Accra", manager="Ama Asante")
        make_store(name="Adwoa's Corner Shop", location="Labone, Accra", manager="Adwoa Darko", status="inactive")

    def test_all_stores_sorted_by_name(self, stores):
        page = _stores(StoreQuery())
        assert [store.name for store in page.items] == [
            "Adwoa's Corner Shop",
            "Ama's Furniture & Home",
            "Kofi Tech Hub",
        ]

    def test_status_filter(self, stores):
        page = _stores(StoreQuery(status=StoreStatus.INACTIVE))
        assert [store.name for store in page.items] == ["Adwoa's Corner Shop"]

    def test_search_matches_name_only(self, stores):
        assert _stores(StoreQuery(q="tech")).total == 1
        assert _stores(StoreQuery(q="Labone")).total == 0

    def test_sort_by_manager_descending(self, stores):
        managers = [store.manager for store in _stores(StoreQuery(sort="manager,desc")).items]
        assert managers == ["Kofi Mensah", "Ama Asante", "Adwoa Darko"]


class TestEqualSortValues:
    @pytest.fixture()
    def identical_category(self, make_store, make_product):
        store_id = make_store()
        for index in range(25):
            make_product(store_id, name=f"Cable {index:02d}", sku=f"CBL-{index:02d}", category="electronics", price=10)

    def _page_through(self, sort):
        ids = []
        for page in (1, 2, 3):
            ids.extend(str(product.id) for product in _products(ProductQuery(sort=sort, page=page, limit=10)).items)
        return ids

    @pytest.mark.parametrize("sort", ["category,asc", "price,asc", "status,asc"])
    def test_every_row_appears_once_ordered_by_id(self, identical_category, sort):
        ids = self._page_through(sort)
        assert len(ids) == 25
        assert ids == sorted(set(ids))

    def test_descending_ties_are_ordered_by_id_descending(self, identical_category):
        ids = self._page_through("category,desc")
        assert ids == sorted(set(ids), reverse=True)
