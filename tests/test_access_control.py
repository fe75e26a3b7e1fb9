from types import SimpleNamespace

import pytest

from app.core.errors import AuthorizationDenied, NotFound
from app.core.security import Identity
from app.models.inventory import Inventory, InventoryShare
from app.services.access_control import (
    can_access,
    get_accessible_inventory,
    get_owned_inventory,
    is_owner,
    is_shared_with,
    visible_inventories,
)


class TestPredicates:
    def test_owner_has_access_without_emails(self, owner):
        inventory = SimpleNamespace(owner_id=owner.user_id)
        bare_owner = Identity.build(owner.user_id)
        assert is_owner(bare_owner, inventory)
        assert can_access(bare_owner, inventory, [])

    def test_allow_listed_email_grants_access(self, owner, guest):
        inventory = SimpleNamespace(owner_id=owner.user_id)
        assert can_access(guest, inventory, ["guest@example.com"])
        assert not is_owner(guest, inventory)

    def test_email_match_ignores_case_and_whitespace(self, guest):
        assert is_shared_with(guest, ["  GUEST@example.COM "])

    def test_stranger_is_denied(self, owner, stranger):
        inventory = SimpleNamespace(owner_id=owner.user_id)
        assert not can_access(stranger, inventory, ["guest@example.com"])

    def test_identity_without_emails_never_matches_shares(self, owner):
        inventory = SimpleNamespace(owner_id=owner.user_id)
        assert not can_access(Identity.build("someone-else"), inventory, ["guest@example.com"])


async def _shared_inventory(owner, email):
    inventory = await Inventory.create(owner_id=owner.user_id, name="Shared")
    await InventoryShare.create(inventory=inventory, email=email)
    return inventory


@pytest.mark.asyncio
async def test_visible_inventories_is_union_of_owned_and_shared(db, owner, guest, stranger):
    owned_by_guest = await Inventory.create(owner_id=guest.user_id, name="Guest's own")
    shared = await _shared_inventory(owner, "guest@example.com")
    await Inventory.create(owner_id=owner.user_id, name="Private")

    visible = {i.id for i in await visible_inventories(guest)}
    assert visible == {owned_by_guest.id, shared.id}
    assert await visible_inventories(stranger).count() == 0


@pytest.mark.asyncio
async def test_inventory_shared_with_two_of_my_emails_is_listed_once(db, owner, guest):
    inventory = await _shared_inventory(owner, "guest@example.com")
    await InventoryShare.create(inventory=inventory, email="guest.alt@example.com")

    visible = await visible_inventories(guest)
    assert [i.id for i in visible] == [inventory.id]


@pytest.mark.asyncio
async def test_hidden_inventory_reads_as_not_found(db, owner, stranger):
    inventory = await Inventory.create(owner_id=owner.user_id, name="Private")

    with pytest.raises(NotFound):
        await get_accessible_inventory(stranger, inventory.id)


@pytest.mark.asyncio
async def test_shared_user_is_denied_owner_operations(db, owner, guest):
    inventory = await _shared_inventory(owner, "guest@example.com")

    loaded = await get_accessible_inventory(guest, inventory.id)
    assert loaded.allowed_emails() == ["guest@example.com"]
    with pytest.raises(AuthorizationDenied):
        await get_owned_inventory(guest, inventory.id)
    assert (await get_owned_inventory(owner, inventory.id)).id == inventory.id
