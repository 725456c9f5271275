"""Store management: create, update and delete commands with their handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.exceptions import NotFoundError
from stockroom.product.product import Product
from stockroom.store.store import Store
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)


@stockroom.command(part_of="Store")
class CreateStore:
    name: String(required=True, max_length=255, sanitize=False)
    location: String(required=True, max_length=255, sanitize=False)
    manager: String(required=True, max_length=255, sanitize=False)
    status: String(max_length=20)


@stockroom.command(part_of="Store")
class UpdateStore:
    store_id: Identifier(required=True)
    name: String(max_length=255, sanitize=False)
    location: String(max_length=255, sanitize=False)
    manager: String(max_length=255, sanitize=False)
    status: String(max_length=20)


@stockroom.command(part_of="Store")
class DeleteStore:
    store_id: Identifier(required=True)


@stockroom.command_handler(part_of=Store)
class ManageStoreHandler:
    @handle(CreateStore)
    def create_store(self, command):
        store = Store.create(
            name=command.name,
            location=command.location,
            manager=command.manager,
            status=command.status,
        )
        current_domain.repository_for(Store).add(store)

        logger.info("Store created", store_id=str(store.id), name=store.name)
        return str(store.id)

    @handle(UpdateStore)
    def update_store(self, command):
        repo = current_domain.repository_for(Store)
        store = _load(repo, command.store_id)

        store.update_details(
            name=command.name,
            location=command.location,
            manager=command.manager,
            status=command.status,
        )
        repo.add(store)

        logger.info("Store updated", store_id=str(store.id), status=store.status)
        return str(store.id)

    @handle(DeleteStore)
    def delete_store(self, command):
        """Remove the store and every product that belongs to it."""
        repo = current_domain.repository_for(Store)
        store = _load(repo, command.store_id)

        product_repo = current_domain.repository_for(Product)
        products = product_repo.for_store(store.id)
        for product in products:
            product_repo._dao.delete(product)
        repo._dao.delete(store)

        logger.info("Store deleted", store_id=str(store.id), products_removed=len(products))
        return str(store.id)


def _load(repo, store_id):
    try:
        return repo.get(str(store_id))
    except ObjectNotFoundError as exc:
        raise NotFoundError("Store not found") from exc
