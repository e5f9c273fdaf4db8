"""
Package marker for source code under `src.quoting`.
It groups the residential quote calculator, its validation rules, and the pricing tier table.
"""

from src.quoting.calculator import QuoteRequest, QuoteResult, compute_quote
from src.quoting.errors import (
    CountTooLargeError,
    InvalidNumberError,
    NonIntegerInputError,
    NonPositiveInputError,
    QuoteComputationError,
    QuoteError,
    QuoteValidationError,
    UnknownTierError,
)
from src.quoting.pricing_tiers import DEFAULT_PRICING_TABLE, PricingTier, load_pricing_table
from src.quoting.validation import build_quote_request

__all__ = [
    "CountTooLargeError",
    "DEFAULT_PRICING_TABLE",
    "InvalidNumberError",
    "NonIntegerInputError",
    "NonPositiveInputError",
    "PricingTier",
    "QuoteComputationError",
    "QuoteError",
    "QuoteRequest",
    "QuoteResult",
    "QuoteValidationError",
    "UnknownTierError",
    "build_quote_request",
    "compute_quote",
    "load_pricing_table",
]
