# src/report/render.py
from __future__ import annotations

from typing import Callable, Optional

from grant.duration import RemainingDuration
from grant.vesting import VestingReport, is_fully_vested


FULLY_VESTED_MSG = "You are 100% vested.  Why are you still here?"


def price_line(ticker: str, price: float, money: Callable[[float], str]) -> str:
    return f"Today's {ticker} price is {money(price)}"


def render_report(
    ticker: str,
    price: float,
    report: VestingReport,
    remaining: Optional[RemainingDuration],
    money: Callable[[float], str],
) -> list[str]:
    """
    Lignes du rapport console. Si le grant est entièrement acquis,
    on s'arrête après le message de félicitations (pas de durée).
    """
    lines = [
        f"{price_line(ticker, price, money)}; "
        f"your total unsold shares are worth {money(report.total_unsold_value)}."
    ]

    if is_fully_vested(report):
        lines.append(FULLY_VESTED_MSG)
        lines.append("")
        return lines

    if remaining is None:
        raise ValueError("remaining requis tant que le grant n'est pas entièrement acquis")

    value = report.share_value
    lines.append(
        f"You are {int(report.portion_done * 100)}% vested, for a total of "
        f"{int(report.vested_unsold_shares)} vested unsold shares "
        f"({money(report.vested_unsold_shares * value)})"
    )
    lines.append(f"But if you quit today, you will walk away from {money(report.unvested_shares * value)}")
    lines.append(f"Hang in there, little trooper! Only{remaining} to go!")
    return lines
