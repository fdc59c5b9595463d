# app/modules/transactions/calculator.py
from decimal import Decimal
from typing import Any, Dict, List

from app.shared.schemas.common import to_money


def line_total(price, quantity: int) -> Decimal:
    """Total de una línea: precio unitario * cantidad"""
    return to_money(to_money(price) * quantity)


def calculate_invoice(items: List[Dict[str, Any]], discount=0, tax=0) -> Dict[str, Any]:
    """Calcular totales de una factura.

    ``items`` son dicts con ``price`` y ``quantity``; se devuelven copias con
    ``total`` calculado. total = subtotal - descuento + impuesto.
    """
    lines = []
    subtotal = Decimal("0")
    for item in items:
        total = line_total(item["price"], item["quantity"])
        lines.append({**item, "price": to_money(item["price"]), "total": total})
        subtotal += total

    discount = to_money(discount or 0)
    tax = to_money(tax or 0)

    return {
        "items": lines,
        "subtotal": to_money(subtotal),
        "discount": discount,
        "tax": tax,
        "total": to_money(subtotal - discount + tax)
    }
