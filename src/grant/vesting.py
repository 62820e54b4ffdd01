# src/grant/vesting.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from app.errors import ConfigError


@dataclass(frozen=True)
class VestingReport:
    portion_done: float              # non borné: <0 avant le début, >1 après la fin
    vested_shares: float
    unvested_shares: float
    vested_unsold_shares: float
    share_value: float               # prix - strike, peut être négatif
    total_unsold_value: float


def portion_done(now: datetime, vest_start: datetime, vest_end: datetime) -> float:
    window = (vest_end - vest_start).total_seconds()
    if window <= 0:
        raise ConfigError("Fenêtre de vesting vide ou négative (vest-end <= vest-start).")
    return (now - vest_start).total_seconds() / window


def compute_vesting_report(
    now: datetime,
    vest_start: datetime,
    vest_end: datetime,
    total_shares: int,
    shares_sold: int,
    strike_price: float,
    current_price: float,
) -> VestingReport:
    """
    Fraction acquise et montants dérivés.
    La valeur totale utilise toutes les actions (valeur papier de la position),
    pas seulement la part acquise.
    """
    done = portion_done(now, vest_start, vest_end)

    vested = float(total_shares) * done
    unvested = float(total_shares) - vested
    vested_unsold = vested - float(shares_sold)

    value = float(current_price) - float(strike_price)

    return VestingReport(
        portion_done=done,
        vested_shares=vested,
        unvested_shares=unvested,
        vested_unsold_shares=vested_unsold,
        share_value=value,
        total_unsold_value=float(total_shares) * value,
    )


def is_fully_vested(report: VestingReport) -> bool:
    return report.portion_done >= 1.0


def round_half_away_from_zero(x: float) -> int:
    if x < 0:
        result = math.ceil(x - 0.5)
    else:
        result = math.floor(x + 0.5)
    return int(result)


def seconds_to_go(now: datetime, vest_end: datetime) -> int:
    return round_half_away_from_zero((vest_end - now).total_seconds())
