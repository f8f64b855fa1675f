import pytest
from pydantic import ValidationError

from schemas import DiscountQuote, DiscountRequest


def test_request_accepts_boundaries():
    assert DiscountRequest(price=0, rate=0).rate == 0
    assert DiscountRequest(price=10, rate=1).rate == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"price": -1, "rate": 0.1},
        {"price": 100, "rate": -0.1},
        {"price": 100, "rate": 1.5},
        {"price": float("nan"), "rate": 0.1},
        {"price": 100},
    ],
)
def test_request_rejects_invalid_payload(payload):
    with pytest.raises(ValidationError):
        DiscountRequest(**payload)


def test_request_is_immutable():
    request = DiscountRequest(price=100, rate=0.1)

    with pytest.raises(ValidationError):
        request.rate = 0.2


def test_quote_serializes_all_fields():
    quote = DiscountQuote(price=100, rate=0.1, discount_amount=10, discounted_price=90)

    assert quote.model_dump() == {
        "price": 100.0,
        "rate": 0.1,
        "discount_amount": 10.0,
        "discounted_price": 90.0,
    }
