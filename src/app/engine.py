# src/app/engine.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import partial
from typing import Callable, Optional

from app.errors import ConfigError
from config.settings import Settings
from grant.duration import RemainingDuration, normalize_duration
from grant.params import GrantParameters, grant_from_settings
from grant.vesting import VestingReport, compute_vesting_report, is_fully_vested, seconds_to_go
from market.alphavantage import Quote, fetch_global_quote
from report.money import format_money
from report.render import price_line, render_report


log = logging.getLogger(__name__)

QuoteFetcher = Callable[[str, Optional[str]], Quote]


@dataclass(frozen=True)
class ReportOutcome:
    grant: GrantParameters
    quote: Quote
    report: VestingReport
    remaining: Optional[RemainingDuration]
    lines: list[str]

    @property
    def fully_vested(self) -> bool:
        return self.remaining is None


def money_formatter(settings: Settings) -> Callable[[float], str]:
    return partial(format_money, symbol=settings.currency_symbol, precision=settings.currency_precision)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def run_report(
    settings: Settings,
    fetch_quote: QuoteFetcher = fetch_global_quote,
    now: Optional[datetime] = None,
) -> ReportOutcome:
    """
    prix -> validation des dates -> calcul -> test 100% -> durée restante.
    Les dates sont validées avant l'appel réseau.
    """
    grant = grant_from_settings(settings)
    quote = fetch_quote(grant.ticker, settings.api_key)
    now = now or utc_now()

    report = compute_vesting_report(
        now=now,
        vest_start=grant.vest_start,
        vest_end=grant.vest_end,
        total_shares=grant.total_shares,
        shares_sold=grant.shares_sold,
        strike_price=grant.strike_price,
        current_price=quote.price,
    )
    log.debug("portion_done=%.6f vested=%.2f unvested=%.2f", report.portion_done, report.vested_shares, report.unvested_shares)

    remaining = None
    if not is_fully_vested(report):
        remaining = normalize_duration(seconds_to_go(now, grant.vest_end))

    lines = render_report(grant.ticker, quote.price, report, remaining, money_formatter(settings))
    return ReportOutcome(grant=grant, quote=quote, report=report, remaining=remaining, lines=lines)


def run_quote(settings: Settings, fetch_quote: QuoteFetcher = fetch_global_quote) -> str:
    if not settings.ticker:
        raise ConfigError("ticker manquant (--ticker ou 'ticker' dans le fichier de config).")
    quote = fetch_quote(settings.ticker, settings.api_key)
    return f"{price_line(settings.ticker, quote.price, money_formatter(settings))} ({quote.latest_trading_day})."
