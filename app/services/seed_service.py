import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, Optional
from tortoise.transactions import in_transaction
from app.models.product import Product
from app.services.inventory_service import get_or_create_default_inventory

log = logging.getLogger(__name__)

# name, price, quantity, low_stock_at, days ago (spread across the 12 week dashboard window)
DEMO_PRODUCTS = [
    ("Laptop Dell XPS 15", "1899.99", 25, 5, 80),
    ("Mouse Logitech MX Master", "99.99", 150, 20, 75),
    ("Keyboard Mechanical RGB", "149.99", 8, 10, 70),
    ('Monitor 27" 4K', "499.99", 12, 3, 65),
    ("USB-C Cable 2m", "19.99", 200, 50, 60),
    ("Webcam HD 1080p", "79.99", 45, 10, 56),
    ("Headphones Sony WH-1000XM5", "399.99", 30, 8, 52),
    ("SSD Samsung 1TB", "129.99", 60, 15, 48),
    ("RAM DDR5 32GB", "189.99", 18, 5, 44),
    ("Graphics Card RTX 4070", "599.99", 0, 2, 40),
    ("Power Supply 750W", "119.99", 22, 5, 36),
    ("Cooling Fan RGB", "39.99", 95, 20, 32),
    ("MacBook Pro M3", "2499.99", 15, 3, 28),
    ('iPad Air 11"', "799.99", 0, 5, 24),
    ("AirPods Pro 2", "249.99", 75, 15, 21),
    ("Magic Mouse", "79.99", 4, 10, 18),
    ("Thunderbolt Cable", "39.99", 120, 30, 16),
    ("External SSD 2TB", "249.99", 35, 8, 14),
    ("Wireless Charger", "49.99", 88, 20, 12),
    ("Laptop Stand Aluminum", "59.99", 42, 10, 10),
    ("USB Hub 7-Port", "34.99", 3, 15, 8),
    ("Blue Yeti Microphone", "129.99", 16, 5, 6),
    ("Ring Light", "45.99", 52, 12, 4),
    ("Desk Mat XXL", "29.99", 0, 10, 2),
    ("Ergonomic Chair", "349.99", 8, 3, 1),
]


async def seed_demo_products(owner_id: str, now: Optional[datetime] = None) -> Dict:
    """
    Fills the owner's default inventory with demo products, once.
    Re-running is a no-op while the inventory already holds products.
    """
    now = now or datetime.now(timezone.utc)
    inventory = await get_or_create_default_inventory(owner_id)

    existing = await Product.filter(inventory_id=inventory.id).count()
    if existing > 0:
        return {"message": "Products already seeded", "inventory_id": inventory.id, "count": existing}

    async with in_transaction() as conn:
        for name, price, quantity, low_stock_at, days_ago in DEMO_PRODUCTS:
            await Product.create(
                owner_id=owner_id,
                inventory=inventory,
                name=name,
                price=Decimal(price),
                quantity=quantity,
                low_stock_at=low_stock_at,
                created_at=now - timedelta(days=days_ago),
                using_db=conn,
            )

    log.info(f"Seeded {len(DEMO_PRODUCTS)} demo products into inventory {inventory.id}.")
    return {"message": "Products seeded successfully", "inventory_id": inventory.id, "count": len(DEMO_PRODUCTS)}
