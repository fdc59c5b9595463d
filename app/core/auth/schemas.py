from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserUpsert(BaseModel):
    """Schema para crear/actualizar un usuario"""
    id: Optional[str] = None
    username: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    role: str = Field("employee", pattern="^(admin|employee)$")
    is_active: bool = True


class UserResponse(BaseModel):
    """Schema para respuesta de usuario"""
    id: str
    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: str = ""
    profile_image_url: Optional[str] = None
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "8a1c5f7e-2f0b-4a52-9a4e-3c1d2b7f9e10",
                "username": "admin",
                "email": "admin@example.com",
                "first_name": "Ana",
                "last_name": "Admin",
                "role": "admin",
                "is_active": True
            }
        }
