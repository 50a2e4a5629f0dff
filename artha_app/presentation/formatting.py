"""Currency rounding and Indian-style formatting."""

import math


def round_currency(value: float) -> int:
    """Round to whole rupees, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return int(-rounded if value < 0 else rounded)


def format_inr(value: float) -> str:
    """
    Format an amount with Indian digit grouping, e.g. ₹12,34,567.

    The last three digits form one group; earlier digits are grouped in
    pairs (lakh, crore).
    """
    amount = round_currency(value)
    sign = "-" if amount < 0 else ""
    digits = str(abs(amount))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        digits = ",".join(pairs + [tail])

    return f"{sign}₹{digits}"
