from pathlib import Path
import os
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from market.alphavantage import Quote


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # pas de vraie config ni de vraie clé pendant les tests
    for name in list(os.environ):
        if name.startswith("WORTH_") or name == "ALPHAVANTAGE_API_KEY":
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture()
def config_file(tmp_path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "ticker: ACME\n"
        "strike-price: 10.0\n"
        "shares: 1000\n"
        "shares-sold: 0\n"
        "vest-start: '2020-01-01T00:00:00Z'\n"
        "vest-end: '2023-12-31T00:00:00Z'\n"
        "apikey: demo\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def fake_quote():
    calls = []

    def fetch(symbol, api_key=None):
        calls.append((symbol, api_key))
        return Quote(symbol=symbol, price=25.0, latest_trading_day="2021-01-01")

    fetch.calls = calls
    return fetch
