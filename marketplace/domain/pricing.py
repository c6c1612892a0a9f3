"""Pricing rules shared by booking creation and promo previews.

All amounts are whole currency units. Fractions are rounded half-up:
5% tax on 1970 is 99, not 98.
"""

import secrets
import string
from decimal import ROUND_HALF_UP, Decimal

from marketplace.domain.models import PriceBreakdown, PromoCode
from marketplace.domain.value_objects import DiscountKind, Money, Quantity

REFERENCE_ALPHABET = string.ascii_uppercase + string.digits
REFERENCE_TOKEN_LENGTH = 6


def round_half_up(amount: Decimal) -> int:
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_discount(promo: PromoCode | None, subtotal: Decimal | int) -> int:
    """Return the discount a promo grants on ``subtotal``.

    A missing promo grants nothing. Percentage promos take ``value`` percent of
    the subtotal; fixed promos take ``value`` regardless of the subtotal.
    """
    if promo is None:
        return 0
    if promo.kind is DiscountKind.PERCENTAGE:
        return round_half_up(Decimal(subtotal) * promo.value / Decimal(100))
    return round_half_up(promo.value)


def calculate_price_breakdown(
    unit_price: Money,
    quantity: Quantity,
    discount: int,
    tax_rate: Decimal,
) -> PriceBreakdown:
    """Price ``quantity`` places at ``unit_price``.

    The total is not clamped: a fixed discount larger than subtotal plus taxes
    yields a negative total.
    """
    subtotal = unit_price.amount * quantity.value
    taxes = round_half_up(Decimal(subtotal) * tax_rate)
    return PriceBreakdown(
        subtotal=subtotal,
        taxes=taxes,
        discount=discount,
        total=subtotal + taxes - discount,
    )


def generate_booking_reference(prefix: str) -> str:
    token = "".join(
        secrets.choice(REFERENCE_ALPHABET) for _ in range(REFERENCE_TOKEN_LENGTH)
    )
    return f"{prefix}{token}".upper()
