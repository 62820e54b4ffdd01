# src/market/alphavantage.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import requests

from app.errors import WorthError


BASE_URL = "https://www.alphavantage.co/query"

log = logging.getLogger(__name__)


class AlphaVantageError(WorthError):
    pass


@dataclass(frozen=True)
class Quote:
    symbol: str
    price: float
    latest_trading_day: str
    open: str = ""
    high: str = ""
    low: str = ""
    previous_close: str = ""
    change: str = ""
    change_percent: str = ""


def _api_key(api_key: Optional[str] = None) -> str:
    key = api_key or os.getenv("ALPHAVANTAGE_API_KEY")
    if not key:
        raise AlphaVantageError("ALPHAVANTAGE_API_KEY manquante (mets-la dans .env ou 'apikey' dans la config).")
    return key


def _get_json(params: dict) -> dict:
    log.debug("GET %s function=%s symbol=%s", BASE_URL, params.get("function"), params.get("symbol"))
    try:
        r = requests.get(
            BASE_URL,
            params=params,
            headers={"X-Requested-With": "Curl"},
            timeout=30,
        )
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as exc:
        raise AlphaVantageError(f"Requête Alpha Vantage échouée: {exc}") from exc
    except ValueError as exc:
        raise AlphaVantageError("Réponse Alpha Vantage illisible (JSON invalide).") from exc

    if not isinstance(data, dict):
        raise AlphaVantageError(f"Réponse inattendue: {type(data).__name__} au lieu d'un objet JSON.")

    # erreurs / rate-limit typiques
    for key in ("Error Message", "Note", "Information"):
        if key in data:
            raise AlphaVantageError(data[key])

    return data


def fetch_global_quote(symbol: str, api_key: Optional[str] = None) -> Quote:
    """
    GLOBAL_QUOTE -> Quote (dernier prix connu).
    Un seul appel, pas de retry.
    """
    params = {
        "function": "GLOBAL_QUOTE",
        "symbol": symbol,
        "apikey": _api_key(api_key),
    }
    data = _get_json(params)

    fields = data.get("Global Quote")
    if fields is None:
        raise AlphaVantageError(f"Réponse inattendue: pas de 'Global Quote'. Clés dispo: {list(data.keys())}.")
    if not fields:
        # symbole inconnu: l'API renvoie un bloc vide
        raise AlphaVantageError(f"Aucune cotation pour {symbol!r}.")

    raw_price = fields.get("05. price", "")
    try:
        price = float(raw_price)
    except (TypeError, ValueError) as exc:
        raise AlphaVantageError(f"Prix non numérique pour {symbol}: {raw_price!r}") from exc

    quote = Quote(
        symbol=fields.get("01. symbol", symbol),
        price=price,
        latest_trading_day=fields.get("07. latest trading day", ""),
        open=fields.get("02. open", ""),
        high=fields.get("03. high", ""),
        low=fields.get("04. low", ""),
        previous_close=fields.get("08. previous close", ""),
        change=fields.get("09. change", ""),
        change_percent=fields.get("10. change percent", ""),
    )
    log.debug("quote %s = %s (%s)", quote.symbol, quote.price, quote.latest_trading_day)
    return quote
