"""Product aggregate and the stock status rule."""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from stockroom.domain import stockroom

DEFAULT_MIN_STOCK = 10


class ProductCategory(Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    FOOD = "food"
    FURNITURE = "furniture"
    TOOLS = "tools"
    OTHER = "other"


class StockStatus(Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


def derive_status(quantity: int, min_stock: int) -> StockStatus:
    """Stock status for a quantity on hand against its reorder threshold.

    Nothing on hand is out of stock; anything up to and including
    `min_stock` is low.
    """
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_stock:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


@stockroom.aggregate
class Product:
    """A stocked item belonging to exactly one store.

    `status` is derived from `quantity` and `min_stock` and is never taken
    from callers.
    """

    name: String(required=True, max_length=255, sanitize=False)
    sku: String(required=True, max_length=100, unique=True, sanitize=False)
    category: String(required=True, choices=ProductCategory)
    price: Float(required=True, min_value=0.0)
    quantity: Integer(default=0, min_value=0)
    min_stock: Integer(default=DEFAULT_MIN_STOCK, min_value=0)
    status: String(choices=StockStatus, default=StockStatus.OUT_OF_STOCK.value)
    store_id: Identifier(required=True)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def status_must_match_stock_levels(self):
        if self.quantity is None or self.min_stock is None:
            return
        expected = derive_status(self.quantity, self.min_stock).value
        if self.status != expected:
            raise ValidationError({"status": [f"Status must be '{expected}' for the current stock levels"]})

    @classmethod
    def create(cls, name, sku, category, price, store_id, quantity=None, min_stock=None):
        quantity = 0 if quantity is None else quantity
        min_stock = DEFAULT_MIN_STOCK if min_stock is None else min_stock
        now = datetime.now(UTC)
        return cls(
            name=name,
            sku=sku,
            category=category,
            price=price,
            quantity=quantity,
            min_stock=min_stock,
            status=_status_value(quantity, min_stock),
            store_id=store_id,
            created_at=now,
            updated_at=now,
        )

    def update_details(
        self,
        name=None,
        sku=None,
        category=None,
        price=None,
        quantity=None,
        min_stock=None,
        store_id=None,
    ):
        """Apply a partial update and recompute the stock status.

        Only arguments that are not None change; status follows the merged
        quantity and threshold.
        """
        changes = {
            "name": name,
            "sku": sku,
            "category": category,
            "price": price,
            "quantity": quantity,
            "min_stock": min_stock,
            "store_id": store_id,
        }
        with atomic_change(self):
            for attribute, value in changes.items():
                if value is not None:
                    setattr(self, attribute, value)
            self.status = _status_value(self.quantity, self.min_stock)
            self.updated_at = datetime.now(UTC)


def _status_value(quantity, min_stock):
    # Invalid stock levels are left for field validation to report
    if not isinstance(quantity, int) or not isinstance(min_stock, int):
        return StockStatus.OUT_OF_STOCK.value
    return derive_status(quantity, min_stock).value
