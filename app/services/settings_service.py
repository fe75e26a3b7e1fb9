from typing import Optional
from tortoise.exceptions import IntegrityError
from app.models.user_settings import UserSettings, Currency, DateFormat, ChartType


async def get_settings(user_id: str) -> UserSettings:
    """Returns the user's settings, creating the defaults on first read."""
    try:
        settings, _ = await UserSettings.get_or_create(user_id=user_id)
    except IntegrityError:
        # A concurrent first read created the row first
        settings = await UserSettings.get(user_id=user_id)
    return settings


async def update_settings(
    user_id: str,
    currency: Optional[Currency] = None,
    date_format: Optional[DateFormat] = None,
    chart_type: Optional[ChartType] = None,
) -> UserSettings:
    """Upsert: only the fields provided are changed."""
    settings = await get_settings(user_id)
    changes = {"currency": currency, "date_format": date_format, "chart_type": chart_type}
    for field, value in changes.items():
        if value is not None:
            setattr(settings, field, value)
    await settings.save()
    return settings
