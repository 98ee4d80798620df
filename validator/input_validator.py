"""
validator/input_validator.py — walidacja wejścia od hosta przed dekodowaniem.

InputValidator.validate(payload) -> ValidationReport

Etapy:
  A — kształt i JSON Schema  (fail-fast: przy błędach nie ma czego dekodować)
  B — wersja hosta           (niezgodność → ostrzeżenie, nigdy błąd)
"""

from __future__ import annotations

from typing import Any

import jsonschema

from .book_schema import INPUT_SCHEMA
from .types import ErrorCode, ValidationError, ValidationReport

# Limit błędów schematu w raporcie
MAX_ERRORS = 20


class InputValidator:
    """
    Walidator tablicy [context, book] otrzymanej od hosta.

    Użycie:
        validator = InputValidator(expected_version="0.4.40")
        report    = validator.validate(json.load(sys.stdin))
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.path, e.message)
    """

    def __init__(
        self,
        expected_version: str,
        schema: dict[str, Any] | None = None,
    ) -> None:
        self._expected_version = expected_version
        self._schema = schema if schema is not None else INPUT_SCHEMA

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate(self, payload: Any) -> ValidationReport:
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []

        # A — kształt + JSON Schema
        self._stage_schema(payload, errors)
        if errors:
            return ValidationReport(is_valid=False, errors=errors, warnings=warnings)

        # B — wersja
        self._stage_version(payload[0], warnings)

        return ValidationReport(is_valid=True, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage A — JSON Schema
    # ------------------------------------------------------------------

    def _stage_schema(self, payload: Any, errors: list[ValidationError]) -> None:
        if not isinstance(payload, list) or len(payload) != 2:
            errors.append(ValidationError(
                code=ErrorCode.NOT_A_PAIR,
                path="/",
                message="oczekiwano tablicy JSON [context, book]",
                expected_fix="Uruchamiaj preprocesor przez mdbook (wysyła [context, book] na stdin).",
                details={"type": type(payload).__name__},
            ))
            return

        validator = jsonschema.Draft202012Validator(self._schema)
        for e in validator.iter_errors(payload):
            path = (
                "/" + "/".join(str(p) for p in e.absolute_path)
                if e.absolute_path
                else "/"
            )
            errors.append(ValidationError(
                code=ErrorCode.SCHEMA_VIOLATION,
                path=path,
                message=e.message,
                expected_fix=f"Popraw naruszenie schematu JSON na ścieżce {path}.",
            ))
            if len(errors) >= MAX_ERRORS:
                break

    # ------------------------------------------------------------------
    # Stage B — wersja hosta
    # ------------------------------------------------------------------

    def _stage_version(self, context: dict[str, Any], warnings: list[ValidationError]) -> None:
        version = context["mdbook_version"]
        if version != self._expected_version:
            warnings.append(ValidationError(
                code=ErrorCode.VERSION_MISMATCH,
                path="/0/mdbook_version",
                message=(
                    f"preprocesor mdbook-merjong zbudowano dla wersji "
                    f"{self._expected_version} mdbook, a wywołuje go wersja "
                    f"{version}"
                ),
                expected_fix="Użyj wersji mdbook zgodnej z preprocesorem lub zaktualizuj mdbook-merjong.",
                details={"expected": self._expected_version, "actual": version},
            ))
