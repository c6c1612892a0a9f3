from marketplace.services.booking_service import BookingService
from marketplace.services.catalog_service import CatalogService
from marketplace.services.promo_service import PromoService

__all__ = ["BookingService", "CatalogService", "PromoService"]
