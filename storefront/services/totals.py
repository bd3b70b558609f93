# storefront/services/totals.py
"""
Money math for the cart. Pure functions, nothing here touches the session.

Tax is a flat 10% on everything, regardless of category or region.
Aggregate totals round once per value (subtotal, tax, total) after summing
unrounded line amounts. compute_line_total keeps its own per-line rounding,
so the sum of displayed line totals may differ from `total` by a cent.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from storefront.data.models import CartLine
from storefront.utils.formatting import to_money

TAX_RATE = Decimal("0.10")


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def compute_line_subtotal(price: Decimal, quantity: int) -> Decimal:
    return to_money(Decimal(price) * quantity)


def compute_line_total(price: Decimal, quantity: int) -> Decimal:
    """Line amount including tax, as printed on a receipt row."""
    return to_money(Decimal(price) * quantity * (1 + TAX_RATE))


def compute_cart_totals(lines: Iterable[CartLine]) -> Totals:
    subtotal = sum((line.price * line.quantity for line in lines), Decimal("0.00"))
    tax = to_money(subtotal * TAX_RATE)
    subtotal = to_money(subtotal)
    return Totals(subtotal=subtotal, tax=tax, total=to_money(subtotal + tax))
