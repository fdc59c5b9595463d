# app/modules/products/service.py
import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from .repository import ProductsRepository
from .schemas import ProductCreate, ProductUpdate
from app.modules.suppliers.repository import SuppliersRepository
from app.shared.database.models import Product
from app.shared.services.integrity import integrity_guard

logger = logging.getLogger(__name__)

DUPLICATE_PRODUCT = "A product with this SKU or barcode already exists"


class ProductsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductsRepository(db)
        self.suppliers = SuppliersRepository(db)

    async def list_products(self, search: Optional[str] = None) -> List[Product]:
        return self.repository.get_products(search)

    async def get_product(self, product_id: str) -> Product:
        product = self.repository.get_product(product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    async def get_product_by_barcode(self, barcode: str) -> Product:
        product = self.repository.get_product_by_barcode(barcode)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    async def get_low_stock_products(self) -> List[Product]:
        return self.repository.get_low_stock_products()

    async def create_product(self, product_data: ProductCreate) -> Product:
        data = product_data.model_dump()
        logger.info(f"Creando producto {data['sku']}")
        self._check_supplier(data.get("supplier_id"))

        with integrity_guard(self.db, DUPLICATE_PRODUCT):
            product = self.repository.create_product(data)

        logger.info(f"Producto creado: {product.id} ({product.name})")
        return product

    async def update_product(self, product_id: str, product_data: ProductUpdate) -> Product:
        changes = product_data.changes()
        self._check_supplier(changes.get("supplier_id"))

        with integrity_guard(self.db, DUPLICATE_PRODUCT):
            product = self.repository.update_product(product_id, changes)

        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    async def delete_product(self, product_id: str) -> None:
        with integrity_guard(self.db, "Product is still referenced by transactions"):
            deleted = self.repository.delete_product(product_id)
        if not deleted:
            logger.info(f"Producto {product_id} no existía, nada que eliminar")

    def _check_supplier(self, supplier_id: Optional[str]) -> None:
        if supplier_id and not self.suppliers.get_supplier(supplier_id):
            raise HTTPException(status_code=404, detail="Supplier not found")
