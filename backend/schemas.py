from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DiscountRequest(BaseModel):
    """A price and the discount rate to apply to it.

    Bounds are enforced at construction so a request that validates can always
    be passed straight to the calculator.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    price: float = Field(..., ge=0.0, description="Monetary amount before discount.")
    rate: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Fraction of the price to subtract, between 0 and 1.",
    )


class DiscountQuote(BaseModel):
    """Rounded breakdown of a discounted price."""

    model_config = ConfigDict(frozen=True)

    price: float = Field(..., ge=0.0, description="Original price.")
    rate: float = Field(..., ge=0.0, le=1.0, description="Discount rate that was applied.")
    discount_amount: float = Field(..., ge=0.0, description="Amount taken off the price.")
    discounted_price: float = Field(..., ge=0.0, description="Price after the discount.")
