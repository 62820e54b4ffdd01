# src/app/errors.py
from __future__ import annotations


class WorthError(RuntimeError):
    """Erreur fatale: le rapport est abandonné, main.py affiche et sort en 1."""


class ConfigError(WorthError):
    pass
