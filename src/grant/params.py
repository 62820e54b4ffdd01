# src/grant/params.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.errors import ConfigError


@dataclass(frozen=True)
class GrantParameters:
    ticker: str
    total_shares: int
    shares_sold: int
    strike_price: float
    vest_start: datetime
    vest_end: datetime


def parse_timestamp(value: Any, field: str) -> datetime:
    """
    RFC3339 -> datetime avec offset, ex: "2018-01-01T00:00:00-08:00" ou "...Z".
    Le YAML peut déjà livrer un datetime: on l'accepte s'il porte un fuseau.
    """
    if value is None or value == "":
        raise ConfigError(f"{field} manquant (format RFC3339, ex: 2018-01-01T00:00:00Z).")

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ConfigError(f"{field} invalide: {value!r} (format RFC3339 attendu).") from exc
    else:
        raise ConfigError(f"{field} invalide: {value!r} (format RFC3339 attendu).")

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ConfigError(f"{field} sans fuseau horaire: {value!r} (ajoute Z ou +HH:MM).")
    return dt


def grant_from_settings(settings) -> GrantParameters:
    vest_start = parse_timestamp(settings.vest_start, "vest-start")
    vest_end = parse_timestamp(settings.vest_end, "vest-end")

    if vest_end <= vest_start:
        raise ConfigError(
            f"vest-end ({vest_end.isoformat()}) doit être strictement après "
            f"vest-start ({vest_start.isoformat()})."
        )
    if not settings.ticker:
        raise ConfigError("ticker manquant (--ticker ou 'ticker' dans le fichier de config).")
    if settings.shares < 0 or settings.shares_sold < 0:
        raise ConfigError("shares et shares-sold doivent être >= 0.")
    if settings.strike_price < 0:
        raise ConfigError("strike-price doit être >= 0.")

    # shares_sold > shares n'est pas bloqué: les montants deviennent négatifs, c'est accepté
    return GrantParameters(
        ticker=settings.ticker,
        total_shares=int(settings.shares),
        shares_sold=int(settings.shares_sold),
        strike_price=float(settings.strike_price),
        vest_start=vest_start,
        vest_end=vest_end,
    )
