# app/modules/dashboard/__init__.py
"""Módulo de Panel - métricas agregadas de ventas, catálogo y clientes"""

from .router import router
from .service import DashboardService
from .repository import DashboardRepository

__all__ = [
    "router",
    "DashboardService",
    "DashboardRepository"
]
