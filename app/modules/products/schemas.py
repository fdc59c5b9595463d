# app/modules/products/schemas.py
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import ClassVar, Optional, Set
from decimal import Decimal
from datetime import datetime

from app.config.settings import settings
from app.shared.schemas.common import (
    OptionalTextModel, PartialUpdateModel, money_input, MONEY_DIGITS, MAX_QUANTITY
)


class ProductCreate(OptionalTextModel):
    """Schema para crear un producto.

    Acepta precios como string ("12.50") igual que el formulario; sin
    ``quantity`` se asume 0 y sin ``min_quantity`` el mínimo configurado.
    """
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    description: Optional[str] = None
    sku: str = Field(..., min_length=1, max_length=100, description="Código interno (único)")
    barcode: Optional[str] = Field(None, max_length=100, description="Código de barras (único)")
    category: Optional[str] = Field(None, max_length=100)
    price: Decimal = Field(..., ge=0, max_digits=MONEY_DIGITS, decimal_places=2, description="Precio de venta")
    cost: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2, description="Precio de costo")
    currency: Optional[str] = Field(None, max_length=10, description="Etiqueta de moneda (TRY, USD)")
    supplier_id: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY, description="Stock actual")
    min_quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY, description="Stock mínimo antes de alerta")
    is_active: bool = True

    @field_validator('price', 'cost', mode='before')
    @classmethod
    def round_money(cls, v):
        return money_input(v)

    @model_validator(mode='after')
    def apply_defaults(self):
        if self.quantity is None:
            self.quantity = 0
        if self.min_quantity is None:
            self.min_quantity = settings.default_min_quantity
        if self.currency is None:
            self.currency = settings.default_currency
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Café molido 500g",
                "sku": "CAF-500",
                "barcode": "8690000000017",
                "category": "Bebidas",
                "price": "145.00",
                "cost": "98.50",
                "currency": "TRY",
                "quantity": 40,
                "min_quantity": 10
            }
        }


class ProductUpdate(PartialUpdateModel):
    """Schema para actualizar un producto (parcial)"""
    not_nullable: ClassVar[Set[str]] = {
        "name", "sku", "price", "currency", "quantity", "min_quantity", "is_active"
    }

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    sku: Optional[str] = Field(None, min_length=1, max_length=100)
    barcode: Optional[str] = Field(None, max_length=100)
    category: Optional[str] = Field(None, max_length=100)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2)
    cost: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2)
    currency: Optional[str] = Field(None, max_length=10)
    supplier_id: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY)
    min_quantity: Optional[int] = Field(None, ge=0, le=MAX_QUANTITY)
    is_active: Optional[bool] = None

    @field_validator('price', 'cost', mode='before')
    @classmethod
    def round_money(cls, v):
        return money_input(v)


class ProductResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    sku: str
    barcode: Optional[str] = None
    category: Optional[str] = None
    price: Decimal
    cost: Optional[Decimal] = None
    currency: Optional[str] = None
    supplier_id: Optional[str] = None
    quantity: int
    min_quantity: int
    is_active: bool
    is_low_stock: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
