# src/main.py

from __future__ import annotations

from dotenv import load_dotenv
load_dotenv()


import logging
import sys
from typing import Optional, Sequence

from app.errors import WorthError
from app.logging_setup import configure_logging
from cli.commands import build_parser
from config.settings import load_settings


log = logging.getLogger("worth")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "debug", False))

    try:
        settings = load_settings(args)
        if settings.debug:
            logging.getLogger().setLevel(logging.DEBUG)
        args.func(args, settings)
    except WorthError as exc:
        # point de sortie unique pour toutes les erreurs fatales
        log.debug("abandon: %s", exc, exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
