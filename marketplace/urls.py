from django.urls import path

from marketplace.handlers import (
    BookingCreateView,
    BookingDetailView,
    ExperienceDetailView,
    ExperienceListView,
    PromoValidateView,
    SlotAvailabilityView,
)

urlpatterns = [
    path("experiences", ExperienceListView.as_view(), name="experience-list"),
    path(
        "experiences/<str:experience_id>",
        ExperienceDetailView.as_view(),
        name="experience-detail",
    ),
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("promo/validate", PromoValidateView.as_view(), name="promo-validate"),
    path(
        "slots/availability",
        SlotAvailabilityView.as_view(),
        name="slot-availability",
    ),
]
