# app/modules/customers/__init__.py
"""
Módulo de Clientes

Arquitectura:
- router.py: Endpoints de clientes
- service.py: Reglas de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import CustomersService
from .repository import CustomersRepository

__all__ = [
    "router",
    "CustomersService",
    "CustomersRepository"
]
