from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
import pytest_asyncio

from app.core.db import init_db, close_db
from app.core.security import Identity

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@dataclass
class FakeProduct:
    """Stand-in for a Product row when exercising the pure aggregation code."""
    quantity: int
    low_stock_at: int
    price: Decimal = Decimal("1.00")
    name: str = "Widget"
    created_at: datetime = NOW
    id: UUID = field(default_factory=uuid4)


@pytest.fixture
def owner():
    return Identity.build("user-owner", ["owner@example.com"])


@pytest.fixture
def guest():
    """Has a verified email the owner can put on an allow-list."""
    return Identity.build("user-guest", ["Guest@Example.com", "guest.alt@example.com"])


@pytest.fixture
def stranger():
    return Identity.build("user-stranger", ["stranger@example.com"])


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory SQLite database per test."""
    await init_db(db_url="sqlite://:memory:", generate_schemas=True)
    yield
    await close_db()
