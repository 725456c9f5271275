"""Repository for the Product aggregate."""

from stockroom.domain import stockroom
from stockroom.product.product import Product
from stockroom.shared.listing import fetch_all


@stockroom.repository(part_of=Product)
class ProductRepository:
    def find_by_sku(self, sku: str) -> Product | None:
        return self._dao.query.filter(sku=sku).all().first

    def for_store(self, store_id) -> list[Product]:
        """Every product that belongs to `store_id`."""
        return fetch_all(self._dao.query.filter(store_id=str(store_id)))
