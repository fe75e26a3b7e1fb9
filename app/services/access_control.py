from typing import Iterable, Optional, Any
from uuid import UUID
from tortoise.expressions import Q
from tortoise.queryset import QuerySet
from app.core.errors import AuthorizationDenied, NotFound
from app.core.security import Identity, normalize_email
from app.models.inventory import Inventory


# --- Pure predicates ---

def is_owner(identity: Identity, inventory: Inventory) -> bool:
    return inventory.owner_id == identity.user_id


def is_shared_with(identity: Identity, allowed_emails: Iterable[str]) -> bool:
    return any(normalize_email(email) in identity.emails for email in allowed_emails)


def can_access(identity: Identity, inventory: Inventory, allowed_emails: Iterable[str]) -> bool:
    """
    Grants read/write of products and read of inventory settings to the owner
    and to any identity holding an allow-listed email.
    """
    return is_owner(identity, inventory) or is_shared_with(identity, allowed_emails)


# --- Queries ---

def visible_inventories(identity: Identity) -> QuerySet:
    """Inventories owned by the identity plus those shared with any of its emails."""
    condition = Q(owner_id=identity.user_id)
    if identity.emails:
        condition = condition | Q(shares__email__in=sorted(identity.emails))
    return Inventory.filter(condition).distinct()


async def get_accessible_inventory(identity: Identity, inventory_id: UUID, conn: Optional[Any] = None) -> Inventory:
    """
    Loads an inventory (with its shares) the identity may use.
    Inventories that are missing or not visible both raise NotFound.
    """
    query = Inventory.get_or_none(id=inventory_id)
    if conn is not None:
        query = query.using_db(conn)
    inventory = await query.prefetch_related("shares")
    if not inventory or not can_access(identity, inventory, inventory.allowed_emails()):
        raise NotFound("Inventory not found")
    return inventory


async def get_owned_inventory(identity: Identity, inventory_id: UUID, conn: Optional[Any] = None) -> Inventory:
    """Like get_accessible_inventory, but shared (non-owner) identities are denied."""
    inventory = await get_accessible_inventory(identity, inventory_id, conn=conn)
    if not is_owner(identity, inventory):
        raise AuthorizationDenied("Only the owner can modify inventory settings")
    return inventory


async def accessible_inventory_ids(identity: Identity) -> list:
    return await visible_inventories(identity).values_list("id", flat=True)
