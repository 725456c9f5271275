"""Store aggregate: a shop location that owns products."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, String

from stockroom.domain import stockroom


class StoreStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@stockroom.aggregate
class Store:
    """A physical shop run by a manager.

    Products reference their store by identifier; removing a store removes
    every product that references it.
    """

    name: String(required=True, max_length=255, sanitize=False)
    location: String(required=True, max_length=255, sanitize=False)
    manager: String(required=True, max_length=255, sanitize=False)
    status: String(choices=StoreStatus, default=StoreStatus.ACTIVE.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name, location, manager, status=None):
        now = datetime.now(UTC)
        return cls(
            name=name,
            location=location,
            manager=manager,
            status=status or StoreStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name=None, location=None, manager=None, status=None):
        """Change the supplied fields; fields left as None keep their value."""
        if name is not None:
            self.name = name
        if location is not None:
            self.location = location
        if manager is not None:
            self.manager = manager
        if status is not None:
            self.status = status
        self.updated_at = datetime.now(UTC)
