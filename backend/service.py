from __future__ import annotations

import logging
from typing import Optional

from config import Settings, get_settings
from schemas import DiscountQuote, DiscountRequest
from tools import calculate_discount, calculate_discount_amount, clamp_rate


logger = logging.getLogger(__name__)


class DiscountService:
    """Stateless entry point for discount calculations.

    Settings are read once at construction. The service holds no other state,
    so a single instance can be shared freely.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings if settings is not None else get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def _effective_rate(self, rate: float) -> float:
        if not self._settings.clamp_rates:
            return rate
        clamped = clamp_rate(rate)
        if clamped != rate:
            logger.warning("Discount rate %s is out of range; clamped to %s", rate, clamped)
        return clamped

    def calculate_discount(self, price: float, rate: float) -> float:
        """Return the discounted price, unrounded."""
        return calculate_discount(price, self._effective_rate(rate))

    def quote(self, request: DiscountRequest) -> DiscountQuote:
        """Build a rounded breakdown for a validated request.

        The price is rounded first and the discounted price is derived from it,
        so `discount_amount + discounted_price` adds back up to `price`.
        """
        places = self._settings.rounding_places

        price = round(request.price, places)
        discount_amount = round(calculate_discount_amount(request.price, request.rate), places)
        discounted_price = round(price - discount_amount, places)

        logger.debug(
            "Quoted price %s at rate %s: discount %s, total %s",
            price,
            request.rate,
            discount_amount,
            discounted_price,
        )
        return DiscountQuote(
            price=price,
            rate=request.rate,
            discount_amount=discount_amount,
            discounted_price=discounted_price,
        )
