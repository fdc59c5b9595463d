# app/api/v1/router.py
from fastapi import APIRouter
from app.api.v1.auth import router as auth_router
from app.modules.dashboard.router import router as dashboard_router
from app.modules.products.router import router as products_router
from app.modules.customers.router import router as customers_router
from app.modules.suppliers.router import router as suppliers_router
from app.modules.transactions.router import router as transactions_router


# Crear router principal de la API
api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(
    dashboard_router,
    prefix="/dashboard",
    tags=["Dashboard"]
)

api_router.include_router(
    products_router,
    prefix="/products",
    tags=["Products"]
)

api_router.include_router(
    customers_router,
    prefix="/customers",
    tags=["Customers"]
)

api_router.include_router(
    suppliers_router,
    prefix="/suppliers",
    tags=["Suppliers"]
)

api_router.include_router(
    transactions_router,
    prefix="/transactions",
    tags=["Transactions"]
)
