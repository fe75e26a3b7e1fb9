import logging
from fastapi import APIRouter, Depends, HTTPException, status
from uuid import UUID
from app.core.errors import StockroomError
from app.core.security import Identity, get_current_identity
from app.schemas.inventory import InventoryCreateRequest, InventoryUpdateRequest, InventoryResponse
from app.schemas.response import SuccessResponse
from app.services.inventory_service import (
    list_inventories,
    create_inventory,
    get_inventory,
    update_inventory,
    delete_inventory,
)

router = APIRouter()
log = logging.getLogger("uvicorn")


@router.get("", response_model=SuccessResponse)
async def list_inventories_endpoint(identity: Identity = Depends(get_current_identity)):
    """Lists owned and shared inventories. First-time users get a default inventory."""
    try:
        inventories = await list_inventories(identity)
        data = [InventoryResponse.from_inventory(i, identity.user_id).model_dump() for i in inventories]
        return SuccessResponse(data=data)
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error fetching inventories: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch inventories.")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_inventory_endpoint(
    payload: InventoryCreateRequest,
    identity: Identity = Depends(get_current_identity),
):
    try:
        inventory = await create_inventory(identity, payload.name, payload.description)
        log.info(f"Inventory {inventory.id} created by {identity.user_id}.")
        return SuccessResponse(data=InventoryResponse.from_inventory(inventory, identity.user_id).model_dump())
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error creating inventory: {e}")
        raise HTTPException(status_code=500, detail="Server failed to create inventory.")


@router.get("/{inventory_id}", response_model=SuccessResponse)
async def get_inventory_endpoint(inventory_id: UUID, identity: Identity = Depends(get_current_identity)):
    try:
        inventory = await get_inventory(identity, inventory_id)
        return SuccessResponse(data=InventoryResponse.from_inventory(inventory, identity.user_id).model_dump())
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error fetching inventory {inventory_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch inventory.")


@router.put("/{inventory_id}", response_model=SuccessResponse)
async def update_inventory_endpoint(
    inventory_id: UUID,
    payload: InventoryUpdateRequest,
    identity: Identity = Depends(get_current_identity),
):
    """
    Updates name, description and the sharing allow-list.
    Only the owner may do this; shared users receive 403.
    """
    try:
        inventory = await update_inventory(
            identity,
            inventory_id,
            name=payload.name,
            description=payload.description,
            allowed_emails=payload.allowed_emails,
        )
        return SuccessResponse(data=InventoryResponse.from_inventory(inventory, identity.user_id).model_dump())
    except StockroomError as e:
        log.warning(f"Inventory update rejected for {identity.user_id}: {e.message}")
        raise
    except Exception as e:
        log.error(f"Error updating inventory {inventory_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update inventory.")


@router.delete("/{inventory_id}", response_model=SuccessResponse)
async def delete_inventory_endpoint(inventory_id: UUID, identity: Identity = Depends(get_current_identity)):
    """Deletes an owned inventory with all of its products. The last inventory cannot be deleted."""
    try:
        deleted_products = await delete_inventory(identity, inventory_id)
        return SuccessResponse(data={
            "message": "Inventory deleted successfully",
            "deleted_products": deleted_products,
        })
    except StockroomError as e:
        log.warning(f"Inventory delete rejected for {identity.user_id}: {e.message}")
        raise
    except Exception as e:
        log.error(f"Error deleting inventory {inventory_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to delete inventory.")
