# app/modules/dashboard/schemas.py
from pydantic import BaseModel, field_validator
from decimal import Decimal

from app.shared.schemas.common import to_money


class DashboardMetrics(BaseModel):
    total_sales: Decimal
    total_orders: int
    active_products: int
    new_customers: int
    low_stock_count: int
    pending_orders: int
    active_customers: int
    returns: int

    @field_validator('total_sales')
    @classmethod
    def round_money(cls, v):
        return to_money(v)
