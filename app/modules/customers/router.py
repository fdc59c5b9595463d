# app/modules/customers/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.core.auth.dependencies import is_authenticated
from .service import CustomersService
from .schemas import CustomerCreate, CustomerUpdate, CustomerResponse

router = APIRouter(dependencies=[Depends(is_authenticated)])


@router.get("", response_model=List[CustomerResponse])
async def list_customers(
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Listar clientes (más recientes primero), con búsqueda opcional por nombre"""
    service = CustomersService(db)
    return await service.list_customers(search)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    db: Session = Depends(get_db)
):
    service = CustomersService(db)
    return await service.get_customer(customer_id)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db)
):
    service = CustomersService(db)
    return await service.create_customer(customer_data)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db)
):
    service = CustomersService(db)
    return await service.update_customer(customer_id, customer_data)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: str,
    db: Session = Depends(get_db)
):
    service = CustomersService(db)
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
