"""Currency formatting for integer minor units."""

from __future__ import annotations


def format_currency(minor_units: int) -> str:
    """Format cents as en_US dollars, e.g. ``173000`` -> ``"$1,730.00"``."""

    sign = "-" if minor_units < 0 else ""
    dollars, cents = divmod(abs(minor_units), 100)
    return f"{sign}${dollars:,}.{cents:02d}"
