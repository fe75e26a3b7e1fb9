import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
from app.core.errors import NotFound, ValidationFailed
from app.core.security import Identity
from app.models.product import Product
from app.services.access_control import get_accessible_inventory, accessible_inventory_ids
from app.services.stock import StockFilter, classify_product, matches_filter

log = logging.getLogger(__name__)


def validate_product_fields(name=None, price=None, quantity=None, low_stock_at=None):
    """Rejects blank names and negative numbers before anything is written."""
    if name is not None and not name.strip():
        raise ValidationFailed("Product name is required")
    if price is not None and price < 0:
        raise ValidationFailed("Price cannot be negative")
    if quantity is not None and quantity < 0:
        raise ValidationFailed("Quantity cannot be negative")
    if low_stock_at is not None and low_stock_at < 0:
        raise ValidationFailed("Low stock threshold cannot be negative")


async def list_products(
    identity: Identity,
    inventory_id: UUID,
    search: Optional[str] = None,
    stock_filter: StockFilter = StockFilter.ALL,
) -> List[Product]:
    """
    Products of one inventory, newest first. `search` is a case-insensitive
    substring match on the name; the stock filter reuses the classifier so it
    always agrees with the status shown for each product.
    """
    inventory = await get_accessible_inventory(identity, inventory_id)
    query = Product.filter(inventory_id=inventory.id)
    if search:
        query = query.filter(name__icontains=search.strip())
    products = await query.order_by("-created_at")
    return [p for p in products if matches_filter(classify_product(p), stock_filter)]


async def get_inventory_products(identity: Identity, inventory_id: UUID) -> List[Product]:
    """Snapshot used by the dashboard, stats and export views."""
    inventory = await get_accessible_inventory(identity, inventory_id)
    return await Product.filter(inventory_id=inventory.id).order_by("-created_at")


async def get_product(identity: Identity, product_id: UUID) -> Product:
    product = await Product.get_or_none(id=product_id)
    if not product:
        raise NotFound("Product not found")
    try:
        await get_accessible_inventory(identity, product.inventory_id)
    except NotFound:
        # Hide products in inventories the caller cannot see
        raise NotFound("Product not found") from None
    return product


async def create_product(
    identity: Identity,
    inventory_id: UUID,
    name: str,
    price: Decimal,
    quantity: int,
    low_stock_at: int,
) -> Product:
    validate_product_fields(name, price, quantity, low_stock_at)
    inventory = await get_accessible_inventory(identity, inventory_id)
    product = await Product.create(
        owner_id=identity.user_id,
        inventory=inventory,
        name=name,
        price=price,
        quantity=quantity,
        low_stock_at=low_stock_at,
    )
    log.info(f"Product {product.id} added to inventory {inventory.id} by {identity.user_id}.")
    return product


async def update_product(
    identity: Identity,
    product_id: UUID,
    name: Optional[str] = None,
    price: Optional[Decimal] = None,
    quantity: Optional[int] = None,
    low_stock_at: Optional[int] = None,
) -> Product:
    """Partial update; fields passed as None keep their stored value."""
    validate_product_fields(name, price, quantity, low_stock_at)
    product = await get_product(identity, product_id)
    changes = {"name": name, "price": price, "quantity": quantity, "low_stock_at": low_stock_at}
    for field, value in changes.items():
        if value is not None:
            setattr(product, field, value)
    await product.save()
    return product


async def delete_product(identity: Identity, product_id: UUID) -> None:
    product = await get_product(identity, product_id)
    await product.delete()


async def bulk_delete_products(identity: Identity, ids: List[UUID]) -> int:
    """
    Deletes, in a single statement, every listed product whose inventory the
    caller can access. Ids that are unknown or out of reach are skipped.
    """
    inventory_ids = await accessible_inventory_ids(identity)
    if not inventory_ids:
        return 0
    deleted = await Product.filter(id__in=ids, inventory_id__in=inventory_ids).delete()
    log.info(f"Bulk delete by {identity.user_id}: {deleted} of {len(ids)} products removed.")
    return deleted
