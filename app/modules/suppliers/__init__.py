# app/modules/suppliers/__init__.py
"""
Módulo de Proveedores

- Alta, edición y baja de proveedores
- Búsqueda por nombre
- Productos activos por proveedor

Arquitectura:
- router.py: Endpoints de proveedores
- service.py: Reglas de negocio (404 / 409)
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SuppliersService
from .repository import SuppliersRepository

__all__ = [
    "router",
    "SuppliersService",
    "SuppliersRepository"
]
