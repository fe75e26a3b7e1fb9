import logging
from fastapi import APIRouter, Depends, HTTPException
from app.core.security import Identity, get_current_identity
from app.schemas.response import SuccessResponse
from app.schemas.settings import SettingsUpdateRequest, SettingsResponse
from app.services.settings_service import get_settings, update_settings

router = APIRouter()
log = logging.getLogger("uvicorn")


@router.get("", response_model=SuccessResponse)
async def get_settings_endpoint(identity: Identity = Depends(get_current_identity)):
    """Returns the caller's display settings, creating defaults on first access."""
    try:
        settings = await get_settings(identity.user_id)
        return SuccessResponse(data=SettingsResponse.model_validate(settings, from_attributes=True).model_dump())
    except Exception as e:
        log.error(f"Error fetching settings: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch settings.")


@router.put("", response_model=SuccessResponse)
async def put_settings_endpoint(payload: SettingsUpdateRequest, identity: Identity = Depends(get_current_identity)):
    try:
        settings = await update_settings(
            identity.user_id,
            currency=payload.currency,
            date_format=payload.date_format,
            chart_type=payload.chart_type,
        )
        return SuccessResponse(data=SettingsResponse.model_validate(settings, from_attributes=True).model_dump())
    except Exception as e:
        log.error(f"Error updating settings: {e}")
        raise HTTPException(status_code=500, detail="Server failed to update settings.")
