# app/modules/transactions/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import ClassVar, Dict, List, Optional, Set
from decimal import Decimal
from datetime import datetime
from enum import Enum

from app.shared.schemas.common import (
    OptionalTextModel, PartialUpdateModel, money_input, MONEY_DIGITS, MAX_QUANTITY
)


class TransactionStatus(str, Enum):
    """Estados de factura"""
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"


class TransactionItemCreate(OptionalTextModel):
    """Línea de factura enviada por el formulario.

    ``product_name`` y ``price`` se completan desde el producto si faltan;
    el ``total`` de la línea siempre lo calcula el servidor.
    """
    product_id: str = Field(..., min_length=1, description="Producto vendido")
    product_name: Optional[str] = Field(None, max_length=255)
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY, description="Cantidad")
    price: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2, description="Precio unitario")
    total: Optional[Decimal] = Field(None, description="Ignorado, se recalcula")

    @field_validator('price', mode='before')
    @classmethod
    def round_money(cls, v):
        return money_input(v)


class TransactionCreate(OptionalTextModel):
    """Cabecera de la factura"""
    customer_id: Optional[str] = None
    customer_name: Optional[str] = Field(None, max_length=255)
    discount: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS, decimal_places=2)
    tax: Decimal = Field(Decimal("0"), ge=0, max_digits=MONEY_DIGITS, decimal_places=2)
    status: TransactionStatus = TransactionStatus.COMPLETED
    total: Optional[Decimal] = Field(None, description="Ignorado, se recalcula")

    @field_validator('discount', 'tax', mode='before')
    @classmethod
    def empty_amount_is_zero(cls, v):
        v = money_input(v)
        return Decimal("0.00") if v is None else v


class TransactionCreateRequest(BaseModel):
    """Body de POST /transactions: cabecera + líneas"""
    transaction: TransactionCreate
    items: List[TransactionItemCreate] = Field(..., min_length=1, description="Líneas de la factura")

    class Config:
        json_schema_extra = {
            "example": {
                "transaction": {
                    "customer_id": None,
                    "customer_name": "Cliente mostrador",
                    "discount": "5.00",
                    "tax": "18.00",
                    "status": "completed"
                },
                "items": [
                    {"product_id": "8a1c5f7e-2f0b-4a52-9a4e-3c1d2b7f9e10", "quantity": 2, "price": "45.00"}
                ]
            }
        }


class TransactionUpdate(PartialUpdateModel):
    """Cambios permitidos sobre una factura existente"""
    not_nullable: ClassVar[Set[str]] = {"customer_name", "discount", "tax", "status"}
    filled_by: ClassVar[Dict[str, str]] = {"customer_name": "customer_id"}

    customer_id: Optional[str] = None
    customer_name: Optional[str] = Field(None, min_length=1, max_length=255)
    discount: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2)
    tax: Optional[Decimal] = Field(None, ge=0, max_digits=MONEY_DIGITS, decimal_places=2)
    status: Optional[TransactionStatus] = None

    @field_validator('discount', 'tax', mode='before')
    @classmethod
    def round_money(cls, v):
        return money_input(v)


class TransactionItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: str
    line_number: int
    quantity: int
    price: Decimal
    total: Decimal

    class Config:
        from_attributes = True


class TransactionResponse(BaseModel):
    id: str
    transaction_number: str
    customer_id: Optional[str] = None
    customer_name: str
    total: Decimal
    discount: Decimal
    tax: Decimal
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TransactionDetailResponse(TransactionResponse):
    subtotal: Decimal
    items: List[TransactionItemResponse]
