"""
validator — walidator wejścia preprocesora ([context, book] od hosta).

Interfejs publiczny:
    InputValidator   — walidator (etapy A–B)
    INPUT_SCHEMA     — JSON Schema wejścia
    ValidationReport, ValidationError, ErrorCode — typy raportu

Typowe użycie:
    from validator import InputValidator

    validator = InputValidator(expected_version=MDBOOK_VERSION)
    report    = validator.validate(json.load(sys.stdin))
    for w in report.warnings:
        log.warning(w)
"""

from .types import ErrorCode, ValidationError, ValidationReport
from .book_schema import INPUT_SCHEMA
from .input_validator import InputValidator

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValidationReport",
    "INPUT_SCHEMA",
    "InputValidator",
]
