"""Ustawienia CLI — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import os
from dataclasses import dataclass

from preprocessor.errors import ConfigError

DEFAULT_JS_URL = "https://cdn.jsdelivr.net/npm/merjong/dist/merjong.min.js"


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str
    js_url: str
    http_timeout: float

    @classmethod
    def from_env(cls) -> Settings:
        """
        Raises:
            ConfigError: MERJONG_HTTP_TIMEOUT nie jest dodatnią liczbą sekund.
        """
        return cls(
            log_level    = os.getenv("MDBOOK_MERJONG_LOG",   "info"),
            js_url       = os.getenv("MERJONG_JS_URL",       DEFAULT_JS_URL),
            http_timeout = _positive_float("MERJONG_HTTP_TIMEOUT", "30"),
        )


def _positive_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"nieprawidłowa wartość {name}: {raw!r} (oczekiwano liczby sekund)") from exc
    if not value > 0:
        raise ConfigError(f"nieprawidłowa wartość {name}: {raw!r} (musi być większa od zera)")
    return value
