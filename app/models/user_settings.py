from enum import Enum
from tortoise import fields, models
import uuid


class Currency(str, Enum):
    USD = "$"
    EUR = "€"
    GBP = "£"
    JPY = "¥"


class DateFormat(str, Enum):
    US = "MM/DD/YYYY"
    EU = "DD/MM/YYYY"
    ISO = "YYYY-MM-DD"

    @property
    def strftime_pattern(self) -> str:
        return {
            DateFormat.US: "%m/%d/%Y",
            DateFormat.EU: "%d/%m/%Y",
            DateFormat.ISO: "%Y-%m-%d",
        }[self]


class ChartType(str, Enum):
    BAR = "bar"
    AREA = "area"


class UserSettings(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    user_id = fields.CharField(max_length=128, unique=True)
    currency = fields.CharEnumField(Currency, max_length=8, default=Currency.USD)
    date_format = fields.CharEnumField(DateFormat, max_length=16, default=DateFormat.US)
    chart_type = fields.CharEnumField(ChartType, max_length=8, default=ChartType.BAR)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "user_settings"
