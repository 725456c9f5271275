"""Product management: create, update and delete commands with their handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.exceptions import ConflictError, NotFoundError
from stockroom.product.product import Product
from stockroom.store.store import Store
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)


@stockroom.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255, sanitize=False)
    sku: String(required=True, max_length=100, sanitize=False)
    category: String(required=True, max_length=20)
    price: Float(required=True)
    quantity: Integer()
    min_stock: Integer()
    store_id: Identifier(required=True)


@stockroom.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255, sanitize=False)
    sku: String(max_length=100, sanitize=False)
    category: String(max_length=20)
    price: Float()
    quantity: Integer()
    min_stock: Integer()
    store_id: Identifier()


@stockroom.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@stockroom.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)
        _ensure_store_exists(command.store_id)
        _ensure_sku_available(repo, command.sku)

        product = Product.create(
            name=command.name,
            sku=command.sku,
            category=command.category,
            price=command.price,
            quantity=command.quantity,
            min_stock=command.min_stock,
            store_id=command.store_id,
        )
        _save(repo, product)

        logger.info(
            "Product created",
            product_id=str(product.id),
            sku=product.sku,
            store_id=str(product.store_id),
            status=product.status,
        )
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _load(repo, command.product_id)

        if command.store_id is not None:
            _ensure_store_exists(command.store_id)
        if command.sku is not None and command.sku != product.sku:
            _ensure_sku_available(repo, command.sku)

        product.update_details(
            name=command.name,
            sku=command.sku,
            category=command.category,
            price=command.price,
            quantity=command.quantity,
            min_stock=command.min_stock,
            store_id=command.store_id,
        )
        _save(repo, product)

        logger.info("Product updated", product_id=str(product.id), status=product.status)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _load(repo, command.product_id)
        repo._dao.delete(product)

        logger.info("Product deleted", product_id=str(command.product_id))
        return str(command.product_id)


def _load(repo, product_id):
    try:
        return repo.get(str(product_id))
    except ObjectNotFoundError as exc:
        raise NotFoundError("Product not found") from exc


def _ensure_store_exists(store_id):
    try:
        current_domain.repository_for(Store).get(str(store_id))
    except ObjectNotFoundError:
        raise ValidationError({"store_id": ["Store does not exist"]}) from None


def _ensure_sku_available(repo, sku):
    if repo.find_by_sku(sku) is not None:
        raise ConflictError(f"SKU '{sku}' already exists")


def _save(repo, product):
    # The storage layer has the final say on sku uniqueness
    try:
        repo.add(product)
    except ValidationError as exc:
        if "sku" in exc.messages:
            raise ConflictError(f"SKU '{product.sku}' already exists") from exc
        raise
