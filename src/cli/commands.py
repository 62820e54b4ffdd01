# src/cli/commands.py
from __future__ import annotations

import argparse

from app.engine import run_quote, run_report
from config.settings import Settings
from market.alphavantage import fetch_global_quote


def cmd_report(args: argparse.Namespace, settings: Settings) -> None:
    outcome = run_report(settings, fetch_quote=fetch_global_quote)
    print("\n".join(outcome.lines))


def cmd_quote(args: argparse.Namespace, settings: Settings) -> None:
    print(run_quote(settings, fetch_quote=fetch_global_quote))


def cmd_config(args: argparse.Namespace, settings: Settings) -> None:
    print("Fichier de config:", settings.config_path)
    for key, value in settings.masked().items():
        if key == "config_path":
            continue
        print(f"  {key}: {value}")


def _common_flags() -> argparse.ArgumentParser:
    # SUPPRESS: un flag absent ne masque ni l'env ni le fichier YAML
    p = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    p.add_argument("--config", type=str, help="config file (default is $HOME/.config/worth/config.yaml)")
    p.add_argument("--ticker", type=str, help="ticker symbol")
    p.add_argument("--strike-price", dest="strike_price", type=float, help="strike price (default 0.0)")
    p.add_argument("--shares", type=int, help="number of shares (default 1)")
    p.add_argument("--shares-sold", dest="shares_sold", type=int, help="number of shares sold (default 0)")
    p.add_argument("--vest-start", dest="vest_start", type=str, help="vesting start date (RFC3339)")
    p.add_argument("--vest-end", dest="vest_end", type=str, help="vesting end date (RFC3339)")
    p.add_argument("--currency-symbol", dest="currency_symbol", type=str, help="currency symbol (default $)")
    p.add_argument("--currency-precision", dest="currency_precision", type=int, help="fraction digits (default 2)")
    p.add_argument("--debug", action="store_true", help="debug logging on stderr")
    return p


def build_parser() -> argparse.ArgumentParser:
    common = _common_flags()
    p = argparse.ArgumentParser(
        prog="worth",
        description="Find out the value of your stock, and how much longer until you're fully vested.",
        parents=[common],
    )
    p.set_defaults(func=cmd_report)
    sub = p.add_subparsers(dest="cmd")

    p_report = sub.add_parser("report", parents=[common], help="full vesting report (default)")
    p_report.set_defaults(func=cmd_report)

    p_quote = sub.add_parser("quote", parents=[common], help="current price only")
    p_quote.set_defaults(func=cmd_quote)

    p_config = sub.add_parser("config", parents=[common], help="show resolved settings")
    p_config.set_defaults(func=cmd_config)

    return p
