import logging
from fastapi import APIRouter, Depends, HTTPException
from app.core.security import Identity, get_current_identity
from app.schemas.response import SuccessResponse
from app.services.seed_service import seed_demo_products

router = APIRouter()
log = logging.getLogger("uvicorn")


@router.post("", response_model=SuccessResponse)
async def seed_endpoint(identity: Identity = Depends(get_current_identity)):
    """Fills the caller's default inventory with demo products (only if it is empty)."""
    try:
        result = await seed_demo_products(identity.user_id)
        return SuccessResponse(data=result)
    except Exception as e:
        log.error(f"Error seeding products: {e}")
        raise HTTPException(status_code=500, detail="Server failed to seed products.")
