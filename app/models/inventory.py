from tortoise import fields, models
import uuid


class Inventory(models.Model):
    """
    A named collection of products owned by one identity.
    Sharing is stored as InventoryShare rows rather than an array column so
    that "inventories visible to an identity" is a plain relational query.
    """
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    owner_id = fields.CharField(max_length=128)
    name = fields.CharField(max_length=255)
    description = fields.TextField(default="")
    is_default = fields.BooleanField(default=False)
    # Set to owner_id on the default inventory only; the unique index makes
    # lazy default creation safe under concurrent first requests
    default_owner = fields.CharField(max_length=128, null=True, unique=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    shares: fields.ReverseRelation["InventoryShare"]

    class Meta:
        table = "inventories"
        indexes = [
            ("owner_id",),
            ("owner_id", "created_at"),  # Composite: owner's inventories newest first
        ]

    def allowed_emails(self) -> list:
        """Share emails; requires `shares` to be fetched."""
        return sorted(share.email for share in self.shares)


class InventoryShare(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    inventory = fields.ForeignKeyField("models.Inventory", related_name="shares", on_delete=fields.CASCADE)
    email = fields.CharField(max_length=320)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "inventory_shares"
        unique_together = (("inventory", "email"),)
        indexes = [
            ("email",),  # Visibility lookups by caller email
        ]
