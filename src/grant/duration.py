# src/grant/duration.py
from __future__ import annotations

from dataclasses import dataclass


DAYS_PER_YEAR = 365
DAYS_PER_MONTH = DAYS_PER_YEAR // 12  # 30, volontairement < 30.44


@dataclass(frozen=True)
class RemainingDuration:
    seconds: int
    years: int
    months: int
    days: int

    def __str__(self) -> str:
        out = []
        for n, unit in ((self.years, "year"), (self.months, "month"), (self.days, "day")):
            if n > 0:
                out.append(f" {n} {unit}" if n == 1 else f" {n} {unit}s")
        return "".join(out)


def normalize_duration(secs_to_go: int) -> RemainingDuration:
    """
    Découpe un nombre de secondes en (années, mois, jours) avec
    365 j/an et 30 j/mois. Divisions entières, pas d'arrondi.
    Précondition: secs_to_go >= 0 (l'appelant a déjà écarté le cas 100% vested).
    """
    secs = int(secs_to_go)
    if secs < 0:
        raise ValueError(f"secs_to_go négatif: {secs} (grant déjà entièrement acquis ?)")

    minutes = secs // 60
    hours = minutes // 60
    days = hours // 24
    years = days // DAYS_PER_YEAR
    months = days // DAYS_PER_MONTH

    months -= years * 12
    days -= years * DAYS_PER_YEAR
    if months < 0:
        months = 0

    days -= months * DAYS_PER_MONTH
    if days < 0:
        days = 0

    # évite "1 month 30 days"
    if days > 29:
        days -= 30
        months += 1
        if months >= 12:
            months -= 12
            years += 1

    return RemainingDuration(seconds=secs, years=years, months=months, days=days)


def format_remaining(secs_to_go: int) -> str:
    return str(normalize_duration(secs_to_go))
