"""Promo service - previewing a promo code before booking."""

from decimal import Decimal

from marketplace.config import MarketplaceConfig
from marketplace.domain import PromoValidation
from marketplace.domain.pricing import calculate_discount
from marketplace.stores.interfaces import PromoCodeStore

INVALID_PROMO_MESSAGE = "Invalid promo code"


class PromoService:
    """Service for read-only promo code validation."""

    def __init__(self, store: PromoCodeStore, config: MarketplaceConfig) -> None:
        self._store = store
        self._config = config

    def validate_promo(self, code: str, subtotal: Decimal | int | float) -> PromoValidation:
        """Report whether ``code`` exists and what it would take off ``subtotal``.

        An unknown code is not an error: it yields ``valid=False`` and no
        discount.
        """
        promo = self._store.get_promo_code(code)
        if promo is None:
            return PromoValidation(valid=False, discount=0, message=INVALID_PROMO_MESSAGE)

        discount = calculate_discount(promo, Decimal(str(subtotal)))
        return PromoValidation(
            valid=True,
            discount=discount,
            message=(
                f"{promo.description} applied! "
                f"You save {self._config.currency_symbol}{discount}"
            ),
        )
