# app/modules/suppliers/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_
from typing import Any, Dict, List, Optional

from app.shared.database.models import Supplier, Product, utcnow


class SuppliersRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_suppliers(self, search: Optional[str] = None) -> List[Supplier]:
        """Proveedores más recientes primero, filtrando por nombre"""
        query = self.db.query(Supplier)
        if search:
            query = query.filter(Supplier.name.ilike(f"%{search}%"))
        return query.order_by(Supplier.created_at.desc()).all()

    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        return self.db.query(Supplier).filter(Supplier.id == supplier_id).first()

    def create_supplier(self, supplier_data: Dict[str, Any]) -> Supplier:
        supplier = Supplier(**supplier_data)

        self.db.add(supplier)
        self.db.commit()
        self.db.refresh(supplier)
        return supplier

    def update_supplier(self, supplier_id: str, supplier_data: Dict[str, Any]) -> Optional[Supplier]:
        supplier = self.get_supplier(supplier_id)
        if supplier is None:
            return None

        for field, value in supplier_data.items():
            setattr(supplier, field, value)
        supplier.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(supplier)
        return supplier

    def delete_supplier(self, supplier_id: str) -> bool:
        deleted = self.db.query(Supplier).filter(Supplier.id == supplier_id).delete()
        self.db.commit()
        return deleted > 0

    def get_supplier_products(self, supplier_id: str) -> List[Product]:
        """Productos activos del proveedor"""
        return self.db.query(Product).filter(
            and_(
                Product.supplier_id == supplier_id,
                Product.is_active.is_(True)
            )
        ).order_by(Product.created_at.desc()).all()
