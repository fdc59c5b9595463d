# app/modules/transactions/router.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.config.settings import settings
from app.core.auth.dependencies import is_authenticated
from .service import TransactionsService
from .schemas import (
    TransactionCreateRequest, TransactionUpdate,
    TransactionResponse, TransactionDetailResponse
)

router = APIRouter(dependencies=[Depends(is_authenticated)])


@router.get("", response_model=List[TransactionResponse])
async def list_transactions(
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Facturas más recientes primero, paginadas; ``search`` filtra por número"""
    service = TransactionsService(db)
    return await service.list_transactions(limit, offset, search)


@router.get("/{transaction_id}", response_model=TransactionDetailResponse)
async def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Factura con sus líneas"""
    service = TransactionsService(db)
    return await service.get_transaction(transaction_id)


@router.post("", response_model=TransactionDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    request: TransactionCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar factura de venta

    **Incluye:**
    - Número de factura secuencial (INV-001, INV-002, ...)
    - Líneas completadas con nombre/precio del producto si faltan
    - Totales calculados en servidor: subtotal - descuento + impuesto
    - Cabecera y líneas guardadas en un solo commit
    """
    service = TransactionsService(db)
    return await service.create_transaction(request)


@router.put("/{transaction_id}", response_model=TransactionDetailResponse)
async def update_transaction(
    transaction_id: str,
    update: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Cambiar estado (completed / pending / cancelled), cliente, descuento o impuesto"""
    service = TransactionsService(db)
    return await service.update_transaction(transaction_id, update)
