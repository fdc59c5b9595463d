# app/modules/dashboard/service.py
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from .repository import DashboardRepository
from .schemas import DashboardMetrics
from app.shared.database.models import utcnow


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = DashboardRepository(db)

    async def get_metrics(self, now: Optional[datetime] = None) -> DashboardMetrics:
        metrics = self.repository.get_dashboard_metrics(now or utcnow())
        return DashboardMetrics(**metrics)
