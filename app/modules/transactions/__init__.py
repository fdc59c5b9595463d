# app/modules/transactions/__init__.py
"""
Módulo de Ventas - Facturas

Flujo de creación de factura:
- Cabecera (cliente, descuento, impuesto, estado) + lista de líneas
- Totales recalculados en servidor (calculator.py)
- Número secuencial único INV-001, INV-002, ... (numbering.py)

Arquitectura:
- router.py: Endpoints de facturas
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import TransactionsService
from .repository import TransactionsRepository

__all__ = [
    "router",
    "TransactionsService",
    "TransactionsRepository"
]
