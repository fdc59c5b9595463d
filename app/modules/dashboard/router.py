# app/modules/dashboard/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import is_authenticated
from .service import DashboardService
from .schemas import DashboardMetrics

router = APIRouter(dependencies=[Depends(is_authenticated)])


@router.get("/metrics", response_model=DashboardMetrics)
async def get_dashboard_metrics(db: Session = Depends(get_db)):
    """
    Métricas del panel

    **Incluye:**
    - Ventas completadas del mes y clientes activos del mes
    - Total de pedidos, pendientes y devoluciones (canceladas)
    - Productos activos y productos con stock bajo
    - Clientes nuevos del mes
    """
    service = DashboardService(db)
    return await service.get_metrics()
