# app/modules/customers/repository.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from app.shared.database.models import Customer, utcnow


class CustomersRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_customers(self, search: Optional[str] = None) -> List[Customer]:
        """Clientes más recientes primero, filtrando por nombre"""
        query = self.db.query(Customer)
        if search:
            query = query.filter(Customer.name.ilike(f"%{search}%"))
        return query.order_by(Customer.created_at.desc()).all()

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def create_customer(self, customer_data: Dict[str, Any]) -> Customer:
        customer = Customer(**customer_data)

        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def update_customer(self, customer_id: str, customer_data: Dict[str, Any]) -> Optional[Customer]:
        customer = self.get_customer(customer_id)
        if customer is None:
            return None

        for field, value in customer_data.items():
            setattr(customer, field, value)
        customer.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(customer)
        return customer

    def delete_customer(self, customer_id: str) -> bool:
        deleted = self.db.query(Customer).filter(Customer.id == customer_id).delete()
        self.db.commit()
        return deleted > 0
