# app/modules/customers/schemas.py
from pydantic import BaseModel, Field
from typing import ClassVar, Optional, Set
from datetime import datetime

from app.shared.schemas.common import OptionalTextModel, PartialUpdateModel


class CustomerCreate(OptionalTextModel):
    """Schema para crear un cliente"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del cliente")
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    is_active: bool = True


class CustomerUpdate(PartialUpdateModel):
    """Schema para actualizar un cliente (parcial)"""
    not_nullable: ClassVar[Set[str]] = {"name", "is_active"}

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    is_active: Optional[bool] = None


class CustomerResponse(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
