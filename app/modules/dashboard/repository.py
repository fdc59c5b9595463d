# app/modules/dashboard/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_, func
from typing import Any, Dict
from datetime import datetime
from decimal import Decimal

from app.shared.database.models import Transaction, Product, Customer


def month_bounds(now: datetime):
    """Inicio del mes de ``now`` e inicio del mes siguiente"""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


class DashboardRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_dashboard_metrics(self, now: datetime) -> Dict[str, Any]:
        """Métricas agregadas del panel para el mes calendario de ``now``"""
        month_start, month_end = month_bounds(now)
        created_this_month = and_(
            Transaction.created_at >= month_start,
            Transaction.created_at < month_end
        )

        total_sales = self.db.query(
            func.coalesce(func.sum(Transaction.total), 0)
        ).filter(
            and_(Transaction.status == 'completed', created_this_month)
        ).scalar()

        total_orders = self.db.query(func.count(Transaction.id)).scalar()

        active_products = self.db.query(func.count(Product.id)).filter(
            Product.is_active.is_(True)
        ).scalar()

        new_customers = self.db.query(func.count(Customer.id)).filter(
            and_(
                Customer.created_at >= month_start,
                Customer.created_at < month_end
            )
        ).scalar()

        low_stock_count = self.db.query(func.count(Product.id)).filter(
            Product.quantity <= Product.min_quantity
        ).scalar()

        pending_orders = self.db.query(func.count(Transaction.id)).filter(
            Transaction.status == 'pending'
        ).scalar()

        # count(DISTINCT) ignora las facturas sin cliente registrado
        active_customers = self.db.query(
            func.count(func.distinct(Transaction.customer_id))
        ).filter(created_this_month).scalar()

        returns = self.db.query(func.count(Transaction.id)).filter(
            Transaction.status == 'cancelled'
        ).scalar()

        return {
            "total_sales": Decimal(str(total_sales or 0)),
            "total_orders": total_orders or 0,
            "active_products": active_products or 0,
            "new_customers": new_customers or 0,
            "low_stock_count": low_stock_count or 0,
            "pending_orders": pending_orders or 0,
            "active_customers": active_customers or 0,
            "returns": returns or 0
        }
