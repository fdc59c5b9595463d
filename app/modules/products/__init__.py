# app/modules/products/__init__.py
"""
Módulo de Productos - Catálogo e Inventario

- CRUD de productos con SKU y código de barras únicos
- Búsqueda por nombre / SKU / código de barras
- Consulta por código de barras
- Alertas de stock bajo (quantity <= min_quantity)
"""

from .router import router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "ProductsRepository"
]
