# app/modules/customers/service.py
import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from .repository import CustomersRepository
from .schemas import CustomerCreate, CustomerUpdate
from app.shared.database.models import Customer
from app.shared.services.integrity import integrity_guard

logger = logging.getLogger(__name__)


class CustomersService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = CustomersRepository(db)

    async def list_customers(self, search: Optional[str] = None) -> List[Customer]:
        return self.repository.get_customers(search)

    async def get_customer(self, customer_id: str) -> Customer:
        customer = self.repository.get_customer(customer_id)
        if not customer:
            raise HTTPException(status_code=404, detail="Customer not found")
        return customer

    async def create_customer(self, customer_data: CustomerCreate) -> Customer:
        customer = self.repository.create_customer(customer_data.model_dump())
        logger.info(f"Cliente creado: {customer.id} ({customer.name})")
        return customer

    async def update_customer(self, customer_id: str, customer_data: CustomerUpdate) -> Customer:
        customer = self.repository.update_customer(customer_id, customer_data.changes())
        if not customer:
            raise HTTPException(status_code=404, detail="Customer not found")
        return customer

    async def delete_customer(self, customer_id: str) -> None:
        # Las facturas guardan customer_id: no se borra un cliente con ventas
        with integrity_guard(self.db, "Customer is still referenced by transactions"):
            deleted = self.repository.delete_customer(customer_id)
        if not deleted:
            logger.info(f"Cliente {customer_id} no existía, nada que eliminar")
