from datetime import datetime, timedelta, timezone

import pytest

from app.engine import run_quote, run_report
from app.errors import ConfigError
from config.settings import Settings
from report.render import FULLY_VESTED_MSG


VEST_START = datetime(2020, 1, 1, tzinfo=timezone.utc)
VEST_END = VEST_START + timedelta(days=4 * 365)


def _settings(**kw) -> Settings:
    base = dict(
        ticker="ACME",
        strike_price=10.0,
        shares=1000,
        shares_sold=0,
        vest_start=VEST_START.isoformat(),
        vest_end=VEST_END.isoformat(),
        api_key="k",
    )
    base.update(kw)
    return Settings(**base)


def test_one_year_into_four_year_grant(fake_quote) -> None:
    outcome = run_report(_settings(), fetch_quote=fake_quote, now=VEST_START + timedelta(days=365))

    assert fake_quote.calls == [("ACME", "k")]
    assert outcome.report.portion_done == 0.25
    assert not outcome.fully_vested
    assert str(outcome.remaining) == " 3 years"
    assert outcome.lines == [
        "Today's ACME price is $25.00; your total unsold shares are worth $15,000.00.",
        "You are 25% vested, for a total of 250 vested unsold shares ($3,750.00)",
        "But if you quit today, you will walk away from $11,250.00",
        "Hang in there, little trooper! Only 3 years to go!",
    ]


@pytest.mark.parametrize("after", [timedelta(0), timedelta(days=30)])
def test_fully_vested_skips_duration(fake_quote, monkeypatch, after) -> None:
    def no_duration(*_args, **_kw):
        raise AssertionError("duration must not be computed once fully vested")

    monkeypatch.setattr("app.engine.normalize_duration", no_duration)

    outcome = run_report(_settings(), fetch_quote=fake_quote, now=VEST_END + after)

    assert outcome.fully_vested
    assert outcome.remaining is None
    assert outcome.lines[1:] == [FULLY_VESTED_MSG, ""]


def test_underwater_grant_shows_negative_amounts(fake_quote) -> None:
    outcome = run_report(_settings(strike_price=35.0), fetch_quote=fake_quote, now=VEST_START + timedelta(days=365))

    assert outcome.lines[0].endswith("worth -$10,000.00.")
    assert "(-$2,500.00)" in outcome.lines[1]
    assert outcome.lines[2].endswith("-$7,500.00")


def test_currency_preferences(fake_quote) -> None:
    outcome = run_report(
        _settings(currency_symbol="€", currency_precision=0),
        fetch_quote=fake_quote,
        now=VEST_START + timedelta(days=365),
    )
    assert outcome.lines[0] == "Today's ACME price is €25; your total unsold shares are worth €15,000."


def test_bad_dates_fail_before_fetching(fake_quote) -> None:
    with pytest.raises(ConfigError):
        run_report(_settings(vest_start="not a date"), fetch_quote=fake_quote)
    with pytest.raises(ConfigError):
        run_report(_settings(vest_end=VEST_START.isoformat()), fetch_quote=fake_quote)
    assert fake_quote.calls == []


def test_before_vest_start(fake_quote) -> None:
    outcome = run_report(_settings(), fetch_quote=fake_quote, now=VEST_START - timedelta(days=365))
    assert outcome.report.portion_done == pytest.approx(-0.25)
    assert "You are -25% vested" in outcome.lines[1]
    assert outcome.remaining.years == 5


def test_run_quote(fake_quote) -> None:
    assert run_quote(_settings(), fetch_quote=fake_quote) == "Today's ACME price is $25.00 (2021-01-01)."
    with pytest.raises(ConfigError):
        run_quote(_settings(ticker=""), fetch_quote=fake_quote)
