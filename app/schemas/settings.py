from typing import Optional
from pydantic import BaseModel, Field
from app.models.user_settings import ChartType, Currency, DateFormat


class SettingsUpdateRequest(BaseModel):
    """Fields left out keep their stored (or default) value."""
    currency: Optional[Currency] = Field(None, description="Currency symbol shown next to prices.")
    date_format: Optional[DateFormat] = Field(None, description="Pattern used for dates, including CSV export.")
    chart_type: Optional[ChartType] = Field(None, description="Dashboard chart style.")


class SettingsResponse(BaseModel):
    currency: Currency
    date_format: DateFormat
    chart_type: ChartType
