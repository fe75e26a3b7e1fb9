import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
from uuid import UUID
from app.core.errors import StockroomError
from app.core.security import Identity, get_current_identity
from app.schemas.product import ProductCreateRequest, ProductUpdateRequest, BulkDeleteRequest, ProductResponse
from app.schemas.response import SuccessResponse
from app.services.product_service import (
    list_products,
    get_product,
    create_product,
    update_product,
    delete_product,
    bulk_delete_products,
)
from app.services.stock import StockFilter

router = APIRouter()
log = logging.getLogger("uvicorn")


@router.get("", response_model=SuccessResponse)
async def list_products_endpoint(
    inventory_id: UUID = Query(..., description="Inventory to list."),
    search: Optional[str] = Query(None, description="Case-insensitive name search."),
    filter: StockFilter = Query(StockFilter.ALL, description="Stock status filter."),
    identity: Identity = Depends(get_current_identity),
):
    try:
        products = await list_products(identity, inventory_id, search=search, stock_filter=filter)
        return SuccessResponse(data=[ProductResponse.from_product(p).model_dump() for p in products])
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error fetching products: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch products.")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_product_endpoint(payload: ProductCreateRequest, identity: Identity = Depends(get_current_identity)):
    try:
        product = await create_product(
            identity,
            payload.inventory_id,
            name=payload.name,
            price=payload.price,
            quantity=payload.quantity,
            low_stock_at=payload.low_stock_at,
        )
        return SuccessResponse(data=ProductResponse.from_product(product).model_dump())
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error creating product: {e}")
        raise HTTPException(status_code=500, detail="Server failed to create product.")


# Declared before /{product_id} routes so "bulk-delete" is never parsed as an id
@router.post("/bulk-delete", response_model=SuccessResponse)
async def bulk_delete_endpoint(payload: BulkDeleteRequest, identity: Identity = Depends(get_current_identity)):
    try:
        deleted = await bulk_delete_products(identity, payload.ids)
        return SuccessResponse(data={
            "message": f"{deleted} products deleted successfully",
            "deleted_count": deleted,
        })
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error bulk deleting products: {e}")
        raise HTTPException(status_code=500, detail="Server failed to delete products.")


@router.get("/{product_id}", response_model=SuccessResponse)
async def get_product_endpoint(product_id: UUID, identity: Identity = Depends(get_current_identity)):
    try:
        product = await get_product(identity, product_id)
        return SuccessResponse(data=ProductResponse.from_product(product).model_dump())
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error fetching product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch product.")


@router.put("/{product_id}", response_model=SuccessResponse)
async def update_product_endpoint(
    product_id: UUID,
    payload: ProductUpdateRequest,
    identity: Identity = Depends(get_current_identity),
):
    try:
        product = await update_product(
            identity,
            product_id,
            name=payload.name,
            price=payload.price,
            quantity=payload.quantity,
            low_stock_at=payload.low_stock_at,
        )
        return SuccessResponse(data=ProductResponse.from_product(product).model_dump())
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error updating product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update product.")


@router.delete("/{product_id}", response_model=SuccessResponse)
async def delete_product_endpoint(product_id: UUID, identity: Identity = Depends(get_current_identity)):
    try:
        await delete_product(identity, product_id)
        return SuccessResponse(data={"message": "Product deleted successfully"})
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error deleting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Server failed to delete product.")
