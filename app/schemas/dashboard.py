import uuid
from decimal import Decimal
from typing import List
from pydantic import BaseModel, field_serializer
from app.services.aggregation import round_money
from app.services.stock import StockStatus


class DashboardMetrics(BaseModel):
    total_products: int
    total_value: Decimal
    low_stock: int
    out_of_stock: int
    in_stock: int

    @field_serializer("total_value")
    def serialize_total_value(self, value: Decimal) -> float:
        return float(round_money(value))


class WeeklyBucket(BaseModel):
    week: str
    products: int


class RecentProduct(BaseModel):
    id: uuid.UUID
    name: str
    quantity: int
    low_stock_at: int
    status: StockStatus
    level: int


class Efficiency(BaseModel):
    in_stock_percent: int
    low_stock_percent: int
    out_of_stock_percent: int


class DashboardResponse(BaseModel):
    metrics: DashboardMetrics
    weekly_data: List[WeeklyBucket]
    recent_products: List[RecentProduct]
    efficiency: Efficiency


class StatsResponse(BaseModel):
    total_products: int
    total_value: Decimal
    low_stock_count: int
    out_of_stock_count: int

    @field_serializer("total_value")
    def serialize_total_value(self, value: Decimal) -> float:
        return float(round_money(value))
