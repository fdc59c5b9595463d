# app/modules/transactions/repository.py
from sqlalchemy.orm import Session, selectinload
from typing import Any, Dict, List, Optional
import logging

from app.shared.database.models import Transaction, TransactionItem, utcnow

logger = logging.getLogger(__name__)


class TransactionsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_transactions(
        self,
        limit: int = 10,
        offset: int = 0,
        search: Optional[str] = None
    ) -> List[Transaction]:
        """Facturas más recientes primero; ``search`` filtra por número de factura"""
        query = self.db.query(Transaction)
        if search:
            query = query.filter(Transaction.transaction_number.ilike(f"%{search}%"))
        return query.order_by(Transaction.created_at.desc()).offset(offset).limit(limit).all()

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return self.db.query(Transaction).options(
            selectinload(Transaction.items)
        ).filter(Transaction.id == transaction_id).first()

    def get_last_transaction_number(self) -> Optional[str]:
        row = self.db.query(Transaction.transaction_number).order_by(
            Transaction.created_at.desc()
        ).first()
        return row[0] if row else None

    def transaction_number_exists(self, transaction_number: str) -> bool:
        return self.db.query(Transaction.id).filter(
            Transaction.transaction_number == transaction_number
        ).first() is not None

    def create_transaction(
        self,
        transaction_data: Dict[str, Any],
        items_data: List[Dict[str, Any]]
    ) -> Transaction:
        """
        Crear factura con sus líneas en un único commit.

        Proceso:
        1. Crear Transaction
        2. flush para obtener transaction.id
        3. Crear TransactionItems numerados en orden
        4. Commit único
        """
        transaction = Transaction(**transaction_data)
        self.db.add(transaction)
        self.db.flush()

        for line_number, item_data in enumerate(items_data, start=1):
            self.db.add(TransactionItem(
                transaction_id=transaction.id,
                line_number=line_number,
                **item_data
            ))

        self.db.commit()
        self.db.refresh(transaction)
        logger.info(
            f"Factura {transaction.transaction_number} creada con {len(items_data)} líneas"
        )
        return transaction

    def update_transaction(self, transaction_id: str, transaction_data: Dict[str, Any]) -> Optional[Transaction]:
        transaction = self.get_transaction(transaction_id)
        if transaction is None:
            return None

        for field, value in transaction_data.items():
            setattr(transaction, field, value)
        transaction.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(transaction)
        return transaction
