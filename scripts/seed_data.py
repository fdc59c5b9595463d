"""
Script para cargar datos de prueba: usuario admin con sesión, proveedores,
productos y clientes.

Uso:
    pip install -e . && python scripts/seed_data.py
"""
import sys
from decimal import Decimal

from app.config.database import SessionLocal, init_db
from app.config.settings import settings
from app.core.auth.schemas import UserUpsert
from app.core.auth.service import AuthService
from app.modules.customers.repository import CustomersRepository
from app.modules.products.repository import ProductsRepository
from app.modules.suppliers.repository import SuppliersRepository

ADMIN_USER = {
    "id": "00000000-0000-4000-8000-000000000001",
    "username": "admin",
    "email": "admin@example.com",
    "first_name": "Ana",
    "last_name": "Admin",
    "role": "admin",
    "is_active": True
}

SUPPLIERS = [
    {"name": "Distribuidora Norte", "contact_person": "Laura Gómez", "payment_terms": "30 días"},
    {"name": "Lácteos del Valle", "contact_person": "Mehmet Kaya", "payment_terms": "Contado"},
]

PRODUCTS = [
    # (proveedor, datos)
    (0, {"name": "Café molido 500g", "sku": "CAF-500", "barcode": "8690000000017",
         "category": "Bebidas", "price": Decimal("145.00"), "cost": Decimal("98.50"),
         "quantity": 40, "min_quantity": 10}),
    (0, {"name": "Té negro 1kg", "sku": "TE-1000", "barcode": "8690000000024",
         "category": "Bebidas", "price": Decimal("210.00"), "cost": Decimal("150.00"),
         "quantity": 3, "min_quantity": 5}),
    (1, {"name": "Queso blanco 1kg", "sku": "QUE-1000", "barcode": "8690000000031",
         "category": "Lácteos", "price": Decimal("320.00"), "cost": Decimal("250.00"),
         "quantity": 12, "min_quantity": 5}),
]

CUSTOMERS = [
    {"name": "Cliente mostrador"},
    {"name": "Restaurante Ayşe", "phone": "+90 212 555 0199", "email": "compras@ayse.example"},
]


def seed():
    """Crear tablas y cargar datos si la base está vacía"""
    init_db()
    db = SessionLocal()

    try:
        auth = AuthService(db)
        admin = auth.upsert_user(UserUpsert(**ADMIN_USER))
        session = auth.open_session(admin)
        print(f"✅ Usuario {admin.username} listo")
        print(f"   Cookie: {settings.session_cookie_name}={session.sid}")

        suppliers_repo = SuppliersRepository(db)
        if suppliers_repo.get_suppliers():
            print("✅ Ya existen datos de catálogo, no se cargan ejemplos")
            return

        suppliers = [suppliers_repo.create_supplier(data) for data in SUPPLIERS]
        print(f"✅ {len(suppliers)} proveedores creados")

        products_repo = ProductsRepository(db)
        for supplier_index, data in PRODUCTS:
            products_repo.create_product({
                **data,
                "currency": settings.default_currency,
                "supplier_id": suppliers[supplier_index].id
            })
        print(f"✅ {len(PRODUCTS)} productos creados")

        customers_repo = CustomersRepository(db)
        for data in CUSTOMERS:
            customers_repo.create_customer(data)
        print(f"✅ {len(CUSTOMERS)} clientes creados")

    except Exception as e:
        db.rollback()
        print(f"❌ Error cargando datos: {e}")
        sys.exit(1)

    finally:
        db.close()


if __name__ == "__main__":
    seed()
