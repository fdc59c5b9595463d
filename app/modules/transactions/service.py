# app/modules/transactions/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
import logging

from .repository import TransactionsRepository
from .schemas import TransactionCreateRequest, TransactionUpdate
from .calculator import calculate_invoice
from .numbering import next_invoice_number
from app.modules.customers.repository import CustomersRepository
from app.modules.products.repository import ProductsRepository
from app.shared.database.models import Transaction
from app.shared.schemas.common import to_money, MAX_MONEY
from app.shared.services.integrity import integrity_guard

logger = logging.getLogger(__name__)


class TransactionsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = TransactionsRepository(db)
        self.customers = CustomersRepository(db)
        self.products = ProductsRepository(db)

    async def list_transactions(
        self,
        limit: int,
        offset: int,
        search: Optional[str] = None
    ) -> List[Transaction]:
        return self.repository.get_transactions(limit, offset, search)

    async def get_transaction(self, transaction_id: str) -> Transaction:
        transaction = self.repository.get_transaction(transaction_id)
        if not transaction:
            raise HTTPException(status_code=404, detail="Transaction not found")
        return transaction

    async def create_transaction(self, request: TransactionCreateRequest) -> Transaction:
        """
        Crear factura completa.

        Responsabilidades:
        - Completar cliente y líneas con datos de BD
        - Recalcular totales (se ignoran los enviados por el cliente)
        - Generar número de factura secuencial
        - Delegar la escritura al repository
        """
        header = request.transaction
        customer_id, customer_name = self._resolve_customer(header.customer_id, header.customer_name)
        items = self._resolve_items(request.items)

        totals = calculate_invoice(items, header.discount, header.tax)
        for line in totals["items"]:
            self._check_amount(line["total"])
        self._check_total(totals["total"])

        transaction_number = next_invoice_number(
            self.repository.get_last_transaction_number(),
            self.repository.transaction_number_exists
        )
        logger.info(
            f"Creando factura {transaction_number} - Cliente: {customer_name}, "
            f"líneas: {len(items)}, total: {totals['total']}"
        )

        transaction_data = {
            "transaction_number": transaction_number,
            "customer_id": customer_id,
            "customer_name": customer_name,
            "total": totals["total"],
            "discount": totals["discount"],
            "tax": totals["tax"],
            "status": header.status.value
        }

        with integrity_guard(self.db, "Transaction conflicts with existing data"):
            return self.repository.create_transaction(transaction_data, totals["items"])

    async def update_transaction(self, transaction_id: str, update: TransactionUpdate) -> Transaction:
        """Actualizar estado/cliente/ajustes; el total se recalcula si cambian descuento o impuesto"""
        transaction = await self.get_transaction(transaction_id)
        changes = update.changes()

        if "status" in changes:
            changes["status"] = changes["status"].value

        if changes.get("customer_id"):
            customer_id, customer_name = self._resolve_customer(
                changes["customer_id"], changes.get("customer_name")
            )
            changes["customer_name"] = customer_name

        if "discount" in changes or "tax" in changes:
            discount = changes.get("discount", transaction.discount)
            tax = changes.get("tax", transaction.tax)
            changes["total"] = to_money(transaction.subtotal - to_money(discount) + to_money(tax))
            self._check_total(changes["total"])

        with integrity_guard(self.db, "Transaction conflicts with existing data"):
            updated = self.repository.update_transaction(transaction_id, changes)
        if "status" in changes:
            logger.info(f"Factura {updated.transaction_number} -> {updated.status}")
        return updated

    # MÉTODOS PRIVADOS HELPERS

    def _resolve_customer(self, customer_id: Optional[str], customer_name: Optional[str]):
        """Cliente existente (si se eligió) y nombre a guardar en la factura"""
        if customer_id:
            customer = self.customers.get_customer(customer_id)
            if not customer:
                raise HTTPException(status_code=404, detail="Customer not found")
            customer_name = customer_name or customer.name

        if not customer_name:
            raise HTTPException(status_code=400, detail="Customer name is required")
        return customer_id, customer_name

    def _resolve_items(self, items) -> List[Dict[str, Any]]:
        """Completar nombre y precio de cada línea desde el producto"""
        products = self.products.get_products_by_ids([item.product_id for item in items])

        resolved = []
        for item in items:
            product = products.get(item.product_id)
            if not product:
                raise HTTPException(status_code=404, detail=f"Product {item.product_id} not found")

            resolved.append({
                "product_id": product.id,
                "product_name": item.product_name or product.name,
                "quantity": item.quantity,
                "price": item.price if item.price is not None else product.price
            })
        return resolved

    @classmethod
    def _check_total(cls, total) -> None:
        if total < 0:
            raise HTTPException(status_code=400, detail="Discount cannot exceed the invoice amount")
        cls._check_amount(total)

    @staticmethod
    def _check_amount(amount) -> None:
        if amount > MAX_MONEY:
            raise HTTPException(status_code=400, detail=f"Invoice amount exceeds {MAX_MONEY}")
