"""
validator/types.py — kody błędów i struktury raportu walidacji wejścia hosta.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer,
    komunikatem i instrukcją naprawy.
ValidationReport — wynik walidacji: is_valid, errors, warnings (ten sam typ wpisu).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora (stage A–B)."""

    # A — JSON Schema
    SCHEMA_VIOLATION  = "E_SCHEMA_VIOLATION"
    NOT_A_PAIR        = "E_NOT_A_PAIR"

    # B — wersja hosta (tylko ostrzeżenie, kod dla details)
    VERSION_MISMATCH  = "W_VERSION_MISMATCH"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         JSON Pointer do miejsca błędu, np. "/1/sections/0/Chapter/content"
    - message:      czytelny opis błędu
    - expected_fix: krótka instrukcja naprawy
    - details:      opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code} {self.path}: {self.message}"


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji wejścia.

    - is_valid: True gdy brak błędów (warnings nie wpływają)
    - errors:   lista błędów (ValidationError)
    - warnings: lista ostrzeżeń (ValidationError z kodem W_*)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)
