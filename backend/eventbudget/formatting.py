"""Formatting helpers for budget output.

Amounts are shown the way Indian event planners read them: rupee symbol,
no paise, and lakh-style digit grouping (e.g. '₹12,34,567' rather than
'₹1,234,567').
"""

from __future__ import annotations

import math

RUPEE = "₹"


def _group_indian(digits: str) -> str:
    """Group a digit string as thousands, then pairs (lakhs, crores, ...)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def format_inr(amount: float) -> str:
    """Format an amount in whole rupees with Indian digit grouping.

    Halves round away from zero: 2.5 -> '₹3', -2.5 -> '-₹3'.
    """
    whole = math.floor(abs(amount) + 0.5)
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}{RUPEE}{_group_indian(str(whole))}"


def format_percent(percentage: float) -> str:
    """Format a percentage with one decimal, e.g. '54.5%'."""
    return f"{percentage:.1f}%"


def format_hours(hours: float) -> str:
    """Render an hour count without a trailing '.0' for whole hours."""
    return f"{hours:g}"
