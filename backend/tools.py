from __future__ import annotations

import logging
import math
from numbers import Real


logger = logging.getLogger(__name__)

MIN_DISCOUNT_RATE: float = 0.0
"""Lowest accepted discount rate (no discount)."""

MAX_DISCOUNT_RATE: float = 1.0
"""Highest accepted discount rate (the whole price is discounted)."""


class InvalidDiscountArgument(ValueError):
    """Raised when a price or discount rate falls outside its valid range."""


def _require_real(name: str, value: object) -> float:
    # bool is a Real subclass but never a meaningful price or rate.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidDiscountArgument(f"{name} must be finite, got {number!r}.")
    return number


def validate_price(price: float) -> float:
    """Return `price` as a float, rejecting negative or non-finite values."""
    number = _require_real("price", price)
    if number < 0.0:
        raise InvalidDiscountArgument(f"price must not be negative, got {number}.")
    return number


def validate_rate(rate: float) -> float:
    """Return `rate` as a float, rejecting values outside [0, 1]."""
    number = _require_real("rate", rate)
    if not MIN_DISCOUNT_RATE <= number <= MAX_DISCOUNT_RATE:
        raise InvalidDiscountArgument(
            f"rate must be between {MIN_DISCOUNT_RATE} and {MAX_DISCOUNT_RATE}, got {number}."
        )
    return number


def clamp_rate(rate: float) -> float:
    """Pull a finite rate into the accepted [0, 1] range."""
    number = _require_real("rate", rate)
    return min(max(number, MIN_DISCOUNT_RATE), MAX_DISCOUNT_RATE)


def calculate_discount_amount(price: float, rate: float) -> float:
    """Return the part of `price` removed by a discount of `rate`."""
    return validate_price(price) * validate_rate(rate)


def calculate_discount(price: float, rate: float) -> float:
    """Return `price` reduced by the fractional discount `rate`.

    The business rule is `price - price * rate`, so a zero rate leaves the
    price untouched and a rate of one brings it down to zero.

    This function is intentionally pure (no I/O) so it is easy to unit test
    and to reason about. Rounding is left to callers that need a currency
    representation.
    """
    price = validate_price(price)
    rate = validate_rate(rate)

    discounted = price - (price * rate)
    logger.debug("Applied discount rate %s to price %s -> %s", rate, price, discounted)
    return discounted
