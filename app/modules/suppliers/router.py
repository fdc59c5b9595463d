# app/modules/suppliers/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.core.auth.dependencies import is_authenticated
from app.modules.products.schemas import ProductResponse
from .service import SuppliersService
from .schemas import SupplierCreate, SupplierUpdate, SupplierResponse

router = APIRouter(dependencies=[Depends(is_authenticated)])


@router.get("", response_model=List[SupplierResponse])
async def list_suppliers(
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Listar proveedores (más recientes primero), con búsqueda opcional por nombre"""
    service = SuppliersService(db)
    return await service.list_suppliers(search)


@router.get("/{supplier_id}/products", response_model=List[ProductResponse])
async def get_supplier_products(
    supplier_id: str,
    db: Session = Depends(get_db)
):
    """Productos activos de un proveedor"""
    service = SuppliersService(db)
    return await service.get_supplier_products(supplier_id)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: str,
    db: Session = Depends(get_db)
):
    service = SuppliersService(db)
    return await service.get_supplier(supplier_id)


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    supplier_data: SupplierCreate,
    db: Session = Depends(get_db)
):
    service = SuppliersService(db)
    return await service.create_supplier(supplier_data)


@router.put("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_id: str,
    supplier_data: SupplierUpdate,
    db: Session = Depends(get_db)
):
    """Actualización parcial: solo se escriben los campos enviados"""
    service = SuppliersService(db)
    return await service.update_supplier(supplier_id, supplier_data)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: str,
    db: Session = Depends(get_db)
):
    service = SuppliersService(db)
    await service.delete_supplier(supplier_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
