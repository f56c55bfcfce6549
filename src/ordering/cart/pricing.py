"""Price parsing and cart subtotal.

Cart lines carry their unit price as a formatted currency string
(``"₹1,050.50"``). Every total shown or stored must be derived with the same
parsing rule, otherwise displayed and computed totals drift apart.
"""

import re

from shared.errors import ValidationFailed

_NON_NUMERIC = re.compile(r"[^0-9.-]+")


def parse_unit_price(price):
    """Strip everything but digits, ``.`` and ``-`` and parse the rest."""
    if isinstance(price, int | float) and not isinstance(price, bool):
        return float(price)

    cleaned = _NON_NUMERIC.sub("", str(price or ""))
    try:
        return float(cleaned)
    except ValueError:
        raise ValidationFailed({"price": [f"Cannot read a price from {price!r}"]}) from None


def line_total(price, quantity):
    return parse_unit_price(price) * quantity


def cart_subtotal(items):
    """Sum of unit price × quantity over cart lines (entities or dicts)."""
    total = 0.0
    for item in items:
        if isinstance(item, dict):
            total += line_total(item["price"], item["quantity"])
        else:
            total += line_total(item.price, item.quantity)
    return total
