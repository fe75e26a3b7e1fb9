import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_serializer, field_validator
from app.core.config import DEFAULT_LOW_STOCK_AT
from app.services.aggregation import round_money
from app.services.stock import StockStatus, classify_product


def _strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Product name is required")
    return value


class ProductCreateRequest(BaseModel):
    inventory_id: uuid.UUID = Field(..., description="Inventory the product belongs to.")
    name: str = Field(..., max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Unit price.")
    quantity: int = Field(..., ge=0, description="Units on hand.")
    low_stock_at: int = Field(DEFAULT_LOW_STOCK_AT, ge=0, description="Quantity at or below which stock is low.")

    check_name = field_validator("name")(_strip_name)


class ProductUpdateRequest(BaseModel):
    """Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, max_length=255)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    quantity: Optional[int] = Field(None, ge=0)
    low_stock_at: Optional[int] = Field(None, ge=0)

    check_name = field_validator("name")(_strip_name)


class BulkDeleteRequest(BaseModel):
    ids: List[uuid.UUID] = Field(..., min_length=1, description="Product ids to delete.")


class ProductResponse(BaseModel):
    id: uuid.UUID
    inventory_id: uuid.UUID
    owner_id: str
    name: str
    price: Decimal
    quantity: int
    low_stock_at: int
    status: StockStatus
    created_at: datetime
    updated_at: datetime

    @field_serializer("price")
    def serialize_price(self, value: Decimal) -> float:
        return float(round_money(value))

    @classmethod
    def from_product(cls, product) -> "ProductResponse":
        return cls(
            id=product.id,
            inventory_id=product.inventory_id,
            owner_id=product.owner_id,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
            low_stock_at=product.low_stock_at,
            status=classify_product(product),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
