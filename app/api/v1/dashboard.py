import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from uuid import UUID
from app.core.errors import StockroomError
from app.core.security import Identity, get_current_identity
from app.schemas.dashboard import DashboardResponse, StatsResponse
from app.schemas.response import SuccessResponse
from app.services.aggregation import build_dashboard, build_stats, export_csv, csv_filename
from app.services.product_service import get_inventory_products
from app.services.settings_service import get_settings

router = APIRouter()
log = logging.getLogger("uvicorn")


@router.get("/dashboard", response_model=SuccessResponse)
async def get_dashboard_endpoint(
    inventory_id: UUID = Query(..., description="Inventory to summarize."),
    identity: Identity = Depends(get_current_identity),
):
    """Key metrics, 12 week product histogram, recent products and stock efficiency."""
    try:
        products = await get_inventory_products(identity, inventory_id)
        data = DashboardResponse.model_validate(build_dashboard(products)).model_dump()
        return SuccessResponse(data=data)
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error fetching dashboard data: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch dashboard data.")


@router.get("/stats", response_model=SuccessResponse)
async def get_stats_endpoint(
    inventory_id: UUID = Query(...),
    identity: Identity = Depends(get_current_identity),
):
    try:
        products = await get_inventory_products(identity, inventory_id)
        return SuccessResponse(data=StatsResponse.model_validate(build_stats(products)).model_dump())
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error fetching stats: {e}")
        raise HTTPException(status_code=500, detail="Server failed to fetch stats.")


@router.get("/export")
async def export_csv_endpoint(
    inventory_id: UUID = Query(...),
    identity: Identity = Depends(get_current_identity),
):
    """Downloads the inventory as CSV, dates rendered in the caller's preferred format."""
    try:
        products = await get_inventory_products(identity, inventory_id)
        settings = await get_settings(identity.user_id)
        content = export_csv(products, settings.date_format)
        return Response(
            content=content,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{csv_filename()}"'},
        )
    except StockroomError:
        raise
    except Exception as e:
        log.error(f"Error exporting data: {e}")
        raise HTTPException(status_code=500, detail="Server failed to export data.")
