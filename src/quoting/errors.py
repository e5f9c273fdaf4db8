# This module defines the error taxonomy for residential quote requests.
# Each validation failure has its own type and machine code so callers can report it distinctly.
# Computation errors are kept separate from validation errors; they signal a bug, not bad input.

from __future__ import annotations

_MAX_DETAIL_CHARS = 64


def _display_value(value: object) -> str | None:
    if value is None:
        return None
    # str() refuses ints beyond the interpreter digit limit.
    if isinstance(value, int) and value.bit_length() > 200:
        return "<integer too large to display>"
    text = str(value)
    if len(text) > _MAX_DETAIL_CHARS:
        return text[:_MAX_DETAIL_CHARS] + "..."
    return text


class QuoteError(Exception):
    """Base class for every quote calculator failure."""

    error_code = "QUOTE_ERROR"


class QuoteValidationError(QuoteError, ValueError):
    """Client input was rejected before any computation ran."""

    error_code = "QUOTE_VALIDATION_ERROR"

    def __init__(self, message: str, *, field: str | None = None, value: object = None) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)

    def details(self) -> dict[str, object]:
        return {"field": self.field, "value": _display_value(self.value)}


class InvalidNumberError(QuoteValidationError):
    error_code = "INVALID_NUMBER"


class NonIntegerInputError(QuoteValidationError):
    error_code = "NON_INTEGER_INPUT"


class NonPositiveInputError(QuoteValidationError):
    error_code = "NON_POSITIVE_INPUT"


class CountTooLargeError(QuoteValidationError):
    error_code = "COUNT_TOO_LARGE"


class UnknownTierError(QuoteValidationError):
    error_code = "UNKNOWN_TIER"


class QuoteComputationError(QuoteError):
    """Raised when the calculator is handed input that validation should have rejected."""

    error_code = "QUOTE_COMPUTATION_ERROR"
