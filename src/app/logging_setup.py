# src/app/logging_setup.py
from __future__ import annotations

import logging
import sys


def configure_logging(debug: bool) -> None:
    # stderr: stdout reste réservé au rapport
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    # basicConfig ne fait rien si des handlers existent déjà
    logging.getLogger().setLevel(level)
