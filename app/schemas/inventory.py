import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


def _strip_required(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Inventory name is required")
    return value


class InventoryCreateRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Display name of the inventory.")
    description: str = Field("", description="Optional free-text description.")

    check_name = field_validator("name")(_strip_required)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value):
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value


class InventoryUpdateRequest(BaseModel):
    """Owner-only metadata update. Omitted fields are left unchanged."""
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    allowed_emails: Optional[List[EmailStr]] = Field(None, description="Replaces the sharing allow-list.")

    check_name = field_validator("name")(_strip_required)


class InventoryResponse(BaseModel):
    id: uuid.UUID
    owner_id: str
    name: str
    description: str
    is_default: bool
    is_owner: bool
    allowed_emails: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_inventory(cls, inventory, user_id: str) -> "InventoryResponse":
        # `shares` must already be fetched
        return cls(
            id=inventory.id,
            owner_id=inventory.owner_id,
            name=inventory.name,
            description=inventory.description,
            is_default=inventory.is_default,
            is_owner=inventory.owner_id == user_id,
            allowed_emails=inventory.allowed_emails(),
            created_at=inventory.created_at,
            updated_at=inventory.updated_at,
        )
