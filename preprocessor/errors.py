"""
preprocessor/errors.py — wyjątki raportowane przez CLI.

Hierarchia:
  MerjongError          — baza; CLI łapie tylko ten typ
    ChapterError        — transformacja rozdziału nie powiodła się
    ProtocolError       — błędne wejście od hosta / błąd zapisu wyjścia
    InstallError        — błąd konfiguracji lub zapisu plików przy instalacji
    ConfigError         — nieprawidłowa wartość zmiennej środowiskowej

Przyczyna pierwotna zawsze w `__cause__` (raise ... from exc), CLI wypisuje
cały łańcuch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validator.types import ValidationReport


class MerjongError(Exception):
    pass


class ChapterError(MerjongError):
    def __init__(self, chapter: str, message: str | None = None) -> None:
        self.chapter = chapter
        super().__init__(message or f"nie udało się przetworzyć rozdziału '{chapter}'")


class ProtocolError(MerjongError):
    def __init__(self, message: str, report: ValidationReport | None = None) -> None:
        self.report = report
        super().__init__(message)


class InstallError(MerjongError):
    pass


class ConfigError(MerjongError):
    pass


def iter_causes(exc: BaseException):
    """Zwraca kolejne wyjątki z łańcucha `__cause__` / `__context__` (bez samego `exc`)."""
    seen: set[int] = {id(exc)}
    current = _next_in_chain(exc)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_in_chain(current)


def _next_in_chain(exc: BaseException) -> BaseException | None:
    return exc.__cause__ or (None if exc.__suppress_context__ else exc.__context__)
