from tortoise import fields, models
from app.core.config import DEFAULT_LOW_STOCK_AT
import uuid


class Product(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    owner_id = fields.CharField(max_length=128) # Identity that created the product
    inventory = fields.ForeignKeyField("models.Inventory", related_name="products", on_delete=fields.CASCADE)
    name = fields.CharField(max_length=255)
    price = fields.DecimalField(max_digits=12, decimal_places=2)
    quantity = fields.IntField(default=0)
    low_stock_at = fields.IntField(default=DEFAULT_LOW_STOCK_AT) # Inclusive low stock threshold
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "products"
        indexes = [
            ("inventory_id",),
            ("inventory_id", "created_at"),  # Composite: inventory listing newest first
        ]
