"""Service construction for the HTTP handlers.

Stores and configuration are wired here so views never touch the ORM.
"""

from marketplace.config import MarketplaceConfig
from marketplace.services import BookingService, CatalogService, PromoService
from marketplace.stores.django_store import (
    DjangoBookingStore,
    DjangoExperienceStore,
    DjangoPromoCodeStore,
)


def get_config() -> MarketplaceConfig:
    return MarketplaceConfig.from_settings()


def get_catalog_service() -> CatalogService:
    return CatalogService(DjangoExperienceStore())


def get_promo_service() -> PromoService:
    return PromoService(DjangoPromoCodeStore(), get_config())


def get_booking_service() -> BookingService:
    return BookingService(
        experiences=DjangoExperienceStore(),
        promo_codes=DjangoPromoCodeStore(),
        bookings=DjangoBookingStore(),
        config=get_config(),
    )
