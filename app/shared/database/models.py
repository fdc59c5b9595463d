# app/shared/database/models.py
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    Numeric, ForeignKey, Index, JSON
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Fecha actual en UTC sin tzinfo (así se guarda en BD)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


# =====================================================
# USUARIOS Y SESIONES
# =====================================================

class User(Base, TimestampMixin):
    """Usuario del panel (admin o empleado)"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    username = Column(String(100), unique=True)
    email = Column(String(255), unique=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    profile_image_url = Column(String(500))
    role = Column(String(20), default='employee')  # admin, employee
    is_active = Column(Boolean, default=True)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class UserSession(Base):
    """Sesión almacenada en BD (cookie connect.sid)"""
    __tablename__ = "sessions"

    sid = Column(String(255), primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("IDX_session_expire", "expire"),
    )

    @property
    def user_id(self):
        """Id del usuario guardado por el login (sess.user.claims.sub)"""
        claims = ((self.sess or {}).get("user") or {}).get("claims") or {}
        return claims.get("sub")


# =====================================================
# CATÁLOGO
# =====================================================

class Supplier(Base, TimestampMixin):
    """Proveedor"""
    __tablename__ = "suppliers"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    contact_person = Column(String(255))
    email = Column(String(255))
    phone = Column(String(50))
    address = Column(Text)
    tax_number = Column(String(50))
    payment_terms = Column(String(100))
    is_active = Column(Boolean, default=True)

    # Relationships
    products = relationship("Product", back_populates="supplier")


class Product(Base, TimestampMixin):
    """Producto del inventario"""
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    sku = Column(String(100), unique=True, nullable=False)
    barcode = Column(String(100), unique=True)
    category = Column(String(100))
    price = Column(Numeric(10, 2), nullable=False)
    cost = Column(Numeric(10, 2))
    currency = Column(String(10), default='TRY')  # TRY, USD
    supplier_id = Column(String(36), ForeignKey("suppliers.id"), index=True)
    quantity = Column(Integer, default=0)
    min_quantity = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)

    # Relationships
    supplier = relationship("Supplier", back_populates="products")

    @property
    def is_low_stock(self) -> bool:
        return (self.quantity or 0) <= (self.min_quantity or 0)


class Customer(Base, TimestampMixin):
    """Cliente"""
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone = Column(String(50))
    address = Column(Text)
    is_active = Column(Boolean, default=True)

    # Relationships
    transactions = relationship("Transaction", back_populates="customer")


# =====================================================
# VENTAS (FACTURAS)
# =====================================================

class Transaction(Base, TimestampMixin):
    """Factura de venta"""
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=generate_id)
    transaction_number = Column(String(50), unique=True, nullable=False)
    customer_id = Column(String(36), ForeignKey("customers.id"), index=True)
    customer_name = Column(String(255), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(10, 2), default=0)
    tax = Column(Numeric(10, 2), default=0)
    status = Column(String(20), default='completed', index=True)  # completed, pending, cancelled

    # Relationships
    customer = relationship("Customer", back_populates="transactions")
    items = relationship(
        "TransactionItem",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionItem.line_number"
    )

    @property
    def subtotal(self) -> Decimal:
        """Suma de los totales de línea"""
        return sum((item.total for item in self.items), Decimal("0"))


class TransactionItem(Base):
    """Línea de factura"""
    __tablename__ = "transaction_items"

    id = Column(String(36), primary_key=True, default=generate_id)
    transaction_id = Column(String(36), ForeignKey("transactions.id"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    product_name = Column(String(255), nullable=False)
    line_number = Column(Integer, nullable=False, default=1)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)

    # Relationships
    transaction = relationship("Transaction", back_populates="items")
    product = relationship("Product")
