# app/shared/schemas/common.py
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, ClassVar, Dict, List, Optional, Set
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")

# Límites de las columnas Numeric(10, 2) e Integer
MONEY_DIGITS = 10
MAX_MONEY = Decimal("99999999.99")
MAX_QUANTITY = 1_000_000


def to_money(value) -> Decimal:
    """Normalizar un monto a Decimal con 2 decimales"""
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
        if not amount.is_finite():
            raise ValueError(f"Monto inválido: {value}")
        return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Monto inválido: {value}") from e


def money_input(value):
    """Validador 'before' de montos: vacío pasa a None, el resto se redondea"""
    value = blank_to_none(value)
    return to_money(value) if value is not None else None


def blank_to_none(value):
    """Los formularios envían "" en campos opcionales: guardarlos como NULL"""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class BaseResponse(BaseModel):
    success: bool
    message: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)


class ErrorResponse(BaseResponse):
    success: bool = False
    errors: Optional[List[Any]] = None


class OptionalTextModel(BaseModel):
    """Base de schemas de entrada: strings vacíos opcionales pasan a None.

    Acepta los nombres de campo en snake_case o camelCase (``productId``,
    ``customerName``) como envían los formularios.
    """

    @field_validator('*', mode='before')
    @classmethod
    def empty_strings_to_none(cls, v, info):
        field = cls.model_fields.get(info.field_name)
        if field is not None and not field.is_required():
            return blank_to_none(v)
        return v

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PartialUpdateModel(OptionalTextModel):
    """Base de schemas de actualización parcial.

    Todos los campos son opcionales, pero los listados en ``not_nullable``
    no pueden enviarse explícitamente como null/vacío, salvo que
    ``filled_by`` indique otro campo enviado desde el que se completan.
    """
    not_nullable: ClassVar[Set[str]] = set()
    filled_by: ClassVar[Dict[str, str]] = {}

    @model_validator(mode='after')
    def check_not_nullable(self):
        for name in self.not_nullable:
            if name not in self.model_fields_set or getattr(self, name) is not None:
                continue
            source = self.filled_by.get(name)
            if source and getattr(self, source, None) is not None:
                continue
            raise ValueError(f"El campo '{name}' no puede estar vacío")
        return self

    def changes(self) -> dict:
        """Solo los campos presentes en el body"""
        return self.model_dump(exclude_unset=True)
