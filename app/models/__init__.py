# app/models/__init__.py
from .inventory import Inventory, InventoryShare
from .product import Product
from .user_settings import UserSettings, Currency, DateFormat, ChartType

# Export all models
__all__ = [
    "Inventory",
    "InventoryShare",
    "Product",
    "UserSettings",
    "Currency",
    "DateFormat",
    "ChartType",
]
