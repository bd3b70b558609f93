# storefront/utils/formatting.py
"""
Display helpers shared by the catalog cards, cart rows and reports.

Money is always Decimal and rounded half-up to cents.
"""
import html
import re
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")
MAX_NAME_LENGTH = 50

_WORD_START = re.compile(r"(^|\s)(\S)")
_NOT_NAME_CHAR = re.compile(r"[^a-zA-Z0-9\s]", re.ASCII)


def to_money(value) -> Decimal:
    # str() first so floats from seed data don't carry binary noise
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_discount(price: Decimal, discount_percent: Decimal) -> Decimal:
    price = Decimal(str(price))
    discount_amount = price * (Decimal(str(discount_percent)) / Decimal("100"))
    return to_money(price - discount_amount)


def format_product_name(name: str) -> str:
    """Trim, lower-case, then capitalise every word; cap at 50 chars."""
    normalized = _WORD_START.sub(
        lambda m: m.group(1) + m.group(2).upper(), name.strip().lower()
    )
    return normalized[:MAX_NAME_LENGTH]


def sanitize_product_name(raw: str) -> str:
    return _NOT_NAME_CHAR.sub("", raw)


def format_description(desc: str) -> str:
    return desc.replace("_", " ").lower().strip()


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def escape(text: str) -> str:
    return html.escape(text, quote=True)
