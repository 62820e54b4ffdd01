# src/report/money.py
from __future__ import annotations


def format_money(amount: float, symbol: str = "$", precision: int = 2) -> str:
    """ex: 15000 -> "$15,000.00", -3.5 -> "-$3.50" """
    value = round(float(amount), precision)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{precision}f}"
