"""Repository for the Store aggregate."""

from stockroom.domain import stockroom
from stockroom.shared.listing import fetch_all
from stockroom.store.store import Store


@stockroom.repository(part_of=Store)
class StoreRepository:
    def names_for(self, store_ids) -> dict[str, str]:
        """Map each of `store_ids` that exists to its store name."""
        ids = sorted({str(store_id) for store_id in store_ids})
        if not ids:
            return {}
        stores = fetch_all(self._dao.query.filter(id__in=ids))
        return {str(store.id): store.name for store in stores}
