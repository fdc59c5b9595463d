# app/modules/suppliers/schemas.py
from pydantic import BaseModel, Field
from typing import ClassVar, Optional, Set
from datetime import datetime

from app.shared.schemas.common import OptionalTextModel, PartialUpdateModel


class SupplierCreate(OptionalTextModel):
    """Schema para crear un proveedor"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del proveedor")
    contact_person: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    tax_number: Optional[str] = Field(None, max_length=50, description="Número fiscal")
    payment_terms: Optional[str] = Field(None, max_length=100, description="Condiciones de pago")
    is_active: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Distribuidora Norte",
                "contact_person": "Laura Gómez",
                "email": "ventas@norte.example",
                "phone": "+90 212 555 0101",
                "tax_number": "1234567890",
                "payment_terms": "30 días"
            }
        }


class SupplierUpdate(PartialUpdateModel):
    """Schema para actualizar un proveedor (parcial)"""
    not_nullable: ClassVar[Set[str]] = {"name", "is_active"}

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_person: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    tax_number: Optional[str] = Field(None, max_length=50)
    payment_terms: Optional[str] = Field(None, max_length=100)
    is_active: Optional[bool] = None


class SupplierResponse(BaseModel):
    id: str
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_number: Optional[str] = None
    payment_terms: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
