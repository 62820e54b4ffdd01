# src/config/settings.py
from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from app.errors import ConfigError


_TRUE = {"1", "true", "yes", "on"}

# clé (fichier YAML) -> (attribut Settings, variable d'env, type)
_FIELDS = {
    "ticker": ("ticker", "WORTH_TICKER", str),
    "strike-price": ("strike_price", "WORTH_STRIKE_PRICE", float),
    "shares": ("shares", "WORTH_SHARES", int),
    "shares-sold": ("shares_sold", "WORTH_SHARES_SOLD", int),
    "vest-start": ("vest_start", "WORTH_VEST_START", str),
    "vest-end": ("vest_end", "WORTH_VEST_END", str),
    "apikey": ("api_key", "ALPHAVANTAGE_API_KEY", str),
    "currency-symbol": ("currency_symbol", "WORTH_CURRENCY_SYMBOL", str),
    "currency-precision": ("currency_precision", "WORTH_CURRENCY_PRECISION", int),
    "debug": ("debug", "WORTH_DEBUG", bool),
}


@dataclass(frozen=True)
class Settings:
    ticker: str = ""
    strike_price: float = 0.0
    shares: int = 1
    shares_sold: int = 0
    vest_start: Any = ""             # str RFC3339, ou datetime si lu depuis le YAML
    vest_end: Any = ""
    api_key: Optional[str] = None
    currency_symbol: str = "$"
    currency_precision: int = 2
    config_path: Optional[Path] = None
    debug: bool = False

    def masked(self) -> dict:
        d = asdict(self)
        if self.api_key:
            key = self.api_key
            # clé courte: tout masquer
            d["api_key"] = "*" * len(key) if len(key) <= 4 else key[:2] + "*" * (len(key) - 2)
        return d


def default_config_path() -> Path:
    return Path.home() / ".config" / "worth" / "config.yaml"


def ensure_config_file(path: Path) -> Path:
    """Crée ~/.config/worth/ (0700) et un config.yaml vide (0600) si absents."""
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    if not path.exists():
        path.touch(mode=0o600)
    return path


def read_config_file(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Fichier de config illisible: {path} ({exc})") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML invalide dans {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: le document YAML doit être un mapping clé: valeur.")
    return data


def _coerce(key: str, value: Any, kind: type) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUE
    if kind is str:
        # les timestamps YAML non quotés arrivent déjà en datetime
        return value if isinstance(value, datetime) else str(value)
    if isinstance(value, bool):
        raise ConfigError(f"{key}: booléen inattendu ({value!r}).")
    if kind is int and isinstance(value, float) and not value.is_integer():
        raise ConfigError(f"{key}: entier attendu, pas {value!r}.")
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key}: valeur invalide {value!r} ({kind.__name__} attendu).") from exc


def load_settings(
    args: Optional[argparse.Namespace] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Priorité: flags CLI > variables d'env > fichier YAML > défauts.
    Construit une seule fois au démarrage puis passé explicitement.
    """
    environ = os.environ if environ is None else environ
    cli = vars(args) if args is not None else {}

    explicit = cli.get("config")
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigError(f"Fichier de config introuvable: {path}")
    else:
        path = ensure_config_file(default_config_path())

    file_values = read_config_file(path)

    values: dict[str, Any] = {}
    for key, (attr, env_name, kind) in _FIELDS.items():
        if cli.get(attr) is not None:
            values[attr] = _coerce(key, cli[attr], kind)
        elif environ.get(env_name):
            values[attr] = _coerce(key, environ[env_name], kind)
        elif file_values.get(key) is not None:
            values[attr] = _coerce(key, file_values[key], kind)

    settings = Settings(config_path=path, **values)
    if settings.currency_precision < 0:
        raise ConfigError(f"currency-precision doit être >= 0 (reçu {settings.currency_precision}).")
    return settings
