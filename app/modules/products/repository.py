# app/modules/products/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import or_
from typing import Any, Dict, List, Optional

from app.shared.database.models import Product, utcnow


class ProductsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_products(self, search: Optional[str] = None) -> List[Product]:
        """Productos más recientes primero; ``search`` busca en nombre, SKU o código de barras"""
        query = self.db.query(Product)
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Product.name.ilike(pattern),
                    Product.sku.ilike(pattern),
                    Product.barcode.ilike(pattern)
                )
            )
        return query.order_by(Product.created_at.desc()).all()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def get_products_by_ids(self, product_ids: List[str]) -> Dict[str, Product]:
        if not product_ids:
            return {}
        products = self.db.query(Product).filter(Product.id.in_(product_ids)).all()
        return {product.id: product for product in products}

    def get_product_by_barcode(self, barcode: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.barcode == barcode).first()

    def create_product(self, product_data: Dict[str, Any]) -> Product:
        product = Product(**product_data)

        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product_id: str, product_data: Dict[str, Any]) -> Optional[Product]:
        product = self.get_product(product_id)
        if product is None:
            return None

        for field, value in product_data.items():
            setattr(product, field, value)
        product.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: str) -> bool:
        deleted = self.db.query(Product).filter(Product.id == product_id).delete()
        self.db.commit()
        return deleted > 0

    def get_low_stock_products(self) -> List[Product]:
        """Productos con quantity <= min_quantity, menor stock primero"""
        return self.db.query(Product).filter(
            Product.quantity <= Product.min_quantity
        ).order_by(Product.quantity.asc()).all()
