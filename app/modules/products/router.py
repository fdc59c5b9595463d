# app/modules/products/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.core.auth.dependencies import is_authenticated
from .service import ProductsService
from .schemas import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter(dependencies=[Depends(is_authenticated)])


@router.get("", response_model=List[ProductResponse])
async def list_products(
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Listar productos (más recientes primero)

    **search** busca sin distinguir mayúsculas en nombre, SKU y código de barras.
    """
    service = ProductsService(db)
    return await service.list_products(search)


@router.get("/low-stock", response_model=List[ProductResponse])
async def list_low_stock_products(db: Session = Depends(get_db)):
    """Productos con stock en o por debajo del mínimo, menor stock primero"""
    service = ProductsService(db)
    return await service.get_low_stock_products()


@router.get("/barcode/{barcode}", response_model=ProductResponse)
async def get_product_by_barcode(
    barcode: str,
    db: Session = Depends(get_db)
):
    """Buscar producto por código de barras (lector en caja)"""
    service = ProductsService(db)
    return await service.get_product_by_barcode(barcode)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    db: Session = Depends(get_db)
):
    service = ProductsService(db)
    return await service.get_product(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db)
):
    """
    Crear producto

    **Validaciones:**
    - SKU obligatorio y único
    - Código de barras opcional y único
    - Proveedor debe existir si se envía
    """
    service = ProductsService(db)
    return await service.create_product(product_data)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    product_data: ProductUpdate,
    db: Session = Depends(get_db)
):
    service = ProductsService(db)
    return await service.update_product(product_id, product_data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    db: Session = Depends(get_db)
):
    service = ProductsService(db)
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
