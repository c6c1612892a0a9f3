from marketplace.handlers.views import (
    BookingCreateView,
    BookingDetailView,
    ExperienceDetailView,
    ExperienceListView,
    PromoValidateView,
    SlotAvailabilityView,
)

__all__ = [
    "BookingCreateView",
    "BookingDetailView",
    "ExperienceDetailView",
    "ExperienceListView",
    "PromoValidateView",
    "SlotAvailabilityView",
]
