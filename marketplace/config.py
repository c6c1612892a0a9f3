"""Marketplace configuration passed explicitly to services."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Self

from django.conf import settings


@dataclass(frozen=True)
class MarketplaceConfig:
    """Business settings for pricing, references and availability."""

    tax_rate: Decimal = Decimal("0.05")
    reference_prefix: str = "HUF"
    reference_attempts: int = 5
    slot_booking_limit: int = 10
    currency_symbol: str = "₹"
    catalog_cache_timeout: int = 300

    def __post_init__(self) -> None:
        if self.tax_rate < 0:
            raise ValueError("Tax rate cannot be negative")
        if self.reference_attempts < 1:
            raise ValueError("At least one reference attempt is required")

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        defaults = cls()
        return cls(
            tax_rate=Decimal(str(values.get("TAX_RATE", defaults.tax_rate))),
            reference_prefix=values.get("REFERENCE_PREFIX", defaults.reference_prefix),
            reference_attempts=int(
                values.get("REFERENCE_ATTEMPTS", defaults.reference_attempts)
            ),
            slot_booking_limit=int(
                values.get("SLOT_BOOKING_LIMIT", defaults.slot_booking_limit)
            ),
            currency_symbol=values.get("CURRENCY_SYMBOL", defaults.currency_symbol),
            catalog_cache_timeout=int(
                values.get("CATALOG_CACHE_TIMEOUT", defaults.catalog_cache_timeout)
            ),
        )

    @classmethod
    def from_settings(cls) -> Self:
        """Build from ``settings.MARKETPLACE``; missing keys use defaults."""
        return cls.from_mapping(getattr(settings, "MARKETPLACE", {}))
