# app/modules/transactions/numbering.py
import re
from typing import Callable, Optional

from app.config.settings import settings


def format_invoice_number(sequence: int, prefix: str = None, width: int = None) -> str:
    """INV-001, INV-002, ... (el ancho es mínimo, INV-1000 sigue siendo válido)"""
    prefix = settings.invoice_prefix if prefix is None else prefix
    width = settings.invoice_number_width if width is None else width
    return f"{prefix}{sequence:0{width}d}"


def parse_invoice_sequence(number: Optional[str], prefix: str = None) -> int:
    """Secuencia numérica de un número de factura, 0 si no tiene el formato esperado"""
    prefix = settings.invoice_prefix if prefix is None else prefix
    if not number:
        return 0
    match = re.fullmatch(re.escape(prefix) + r"(\d+)", number.strip())
    return int(match.group(1)) if match else 0


def next_invoice_number(
    last_number: Optional[str],
    exists: Callable[[str], bool],
    prefix: str = None,
    width: int = None
) -> str:
    """Siguiente número a partir del último creado.

    Si el candidato ya existe (p.ej. la última factura se renumeró a mano)
    se avanza hasta encontrar uno libre.
    """
    sequence = parse_invoice_sequence(last_number, prefix) + 1
    candidate = format_invoice_number(sequence, prefix, width)
    while exists(candidate):
        sequence += 1
        candidate = format_invoice_number(sequence, prefix, width)
    return candidate
