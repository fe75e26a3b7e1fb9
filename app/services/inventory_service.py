import logging
from typing import List, Optional
from uuid import UUID
from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction
from app.core.config import DEFAULT_INVENTORY_NAME, DEFAULT_INVENTORY_DESCRIPTION
from app.core.errors import DomainConstraintViolation, ValidationFailed
from app.core.security import Identity, normalize_emails
from app.models.inventory import Inventory, InventoryShare
from app.models.product import Product
from app.services.access_control import visible_inventories, get_accessible_inventory, get_owned_inventory

log = logging.getLogger(__name__)


async def get_or_create_default_inventory(owner_id: str) -> Inventory:
    """
    Returns the owner's default inventory, creating it if needed.
    The unique default_owner column means only one concurrent request can
    insert it; the losers read the winner's row instead.
    """
    inventory = await Inventory.get_or_none(default_owner=owner_id)
    if inventory:
        return inventory
    try:
        async with in_transaction() as conn:
            inventory = await Inventory.create(
                owner_id=owner_id,
                name=DEFAULT_INVENTORY_NAME,
                description=DEFAULT_INVENTORY_DESCRIPTION,
                is_default=True,
                default_owner=owner_id,
                using_db=conn,
            )
        log.info(f"Created default inventory {inventory.id} for user {owner_id}.")
        return inventory
    except IntegrityError:
        return await Inventory.get(default_owner=owner_id)


async def list_inventories(identity: Identity) -> List[Inventory]:
    """Owned and shared inventories, newest first. An identity with none gets its default created."""
    inventories = await visible_inventories(identity).order_by("-created_at").prefetch_related("shares")
    if not inventories:
        await get_or_create_default_inventory(identity.user_id)
        inventories = await visible_inventories(identity).order_by("-created_at").prefetch_related("shares")
    return list(inventories)


async def create_inventory(identity: Identity, name: str, description: str = "") -> Inventory:
    if not name or not name.strip():
        raise ValidationFailed("Inventory name is required")
    # Only the lazily created inventory is ever the default
    inventory = await Inventory.create(
        owner_id=identity.user_id,
        name=name.strip(),
        description=description or "",
        is_default=False,
    )
    await inventory.fetch_related("shares")
    return inventory


async def get_inventory(identity: Identity, inventory_id: UUID) -> Inventory:
    return await get_accessible_inventory(identity, inventory_id)


async def update_inventory(
    identity: Identity,
    inventory_id: UUID,
    name: Optional[str] = None,
    description: Optional[str] = None,
    allowed_emails: Optional[List[str]] = None,
) -> Inventory:
    """Owner-only update of name, description and the sharing allow-list."""
    if name is not None and not name.strip():
        raise ValidationFailed("Inventory name is required")

    async with in_transaction() as conn:
        inventory = await get_owned_inventory(identity, inventory_id, conn=conn)

        if name is not None:
            inventory.name = name.strip()
        if description is not None:
            inventory.description = description
        await inventory.save(using_db=conn)

        if allowed_emails is not None:
            # Replace the allow-list wholesale
            await InventoryShare.filter(inventory_id=inventory.id).using_db(conn).delete()
            for email in normalize_emails(allowed_emails):
                await InventoryShare.create(inventory=inventory, email=email, using_db=conn)

    await inventory.fetch_related("shares")
    return inventory


async def delete_inventory(identity: Identity, inventory_id: UUID) -> int:
    """
    Deletes an owned inventory and all of its products in one transaction.
    Returns the number of products removed. The owner's last inventory cannot be deleted.
    """
    async with in_transaction() as conn:
        # Lock every owned row so concurrent deletes see each other's result
        owned = await Inventory.filter(owner_id=identity.user_id).select_for_update().using_db(conn)
        inventory = await get_owned_inventory(identity, inventory_id, conn=conn)

        if len(owned) <= 1:
            raise DomainConstraintViolation("Cannot delete your only inventory")

        deleted_products = await Product.filter(inventory_id=inventory.id).using_db(conn).delete()
        await InventoryShare.filter(inventory_id=inventory.id).using_db(conn).delete()
        await inventory.delete(using_db=conn)

    log.info(f"Inventory {inventory_id} deleted by {identity.user_id} with {deleted_products} products.")
    return deleted_products
