# app/modules/suppliers/service.py
import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from .repository import SuppliersRepository
from .schemas import SupplierCreate, SupplierUpdate
from app.shared.database.models import Product, Supplier
from app.shared.services.integrity import integrity_guard

logger = logging.getLogger(__name__)


class SuppliersService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SuppliersRepository(db)

    async def list_suppliers(self, search: Optional[str] = None) -> List[Supplier]:
        return self.repository.get_suppliers(search)

    async def get_supplier(self, supplier_id: str) -> Supplier:
        supplier = self.repository.get_supplier(supplier_id)
        if not supplier:
            raise HTTPException(status_code=404, detail="Supplier not found")
        return supplier

    async def create_supplier(self, supplier_data: SupplierCreate) -> Supplier:
        with integrity_guard(self.db, "Supplier conflicts with existing data"):
            supplier = self.repository.create_supplier(supplier_data.model_dump())
        logger.info(f"Proveedor creado: {supplier.id} ({supplier.name})")
        return supplier

    async def update_supplier(self, supplier_id: str, supplier_data: SupplierUpdate) -> Supplier:
        with integrity_guard(self.db, "Supplier conflicts with existing data"):
            supplier = self.repository.update_supplier(supplier_id, supplier_data.changes())
        if not supplier:
            raise HTTPException(status_code=404, detail="Supplier not found")
        return supplier

    async def delete_supplier(self, supplier_id: str) -> None:
        with integrity_guard(self.db, "Supplier is still referenced by products"):
            deleted = self.repository.delete_supplier(supplier_id)
        if not deleted:
            logger.info(f"Proveedor {supplier_id} no existía, nada que eliminar")

    async def get_supplier_products(self, supplier_id: str) -> List[Product]:
        return self.repository.get_supplier_products(supplier_id)
