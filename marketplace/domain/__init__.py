from marketplace.domain.models import (
    Booking,
    BookingRequest,
    Experience,
    NewBooking,
    PriceBreakdown,
    PromoCode,
    PromoValidation,
    TimeSlot,
)
from marketplace.domain.value_objects import (
    BookingId,
    DiscountKind,
    ExperienceId,
    Money,
    Quantity,
)

__all__ = [
    "Booking",
    "BookingRequest",
    "Experience",
    "NewBooking",
    "PriceBreakdown",
    "PromoCode",
    "PromoValidation",
    "TimeSlot",
    "BookingId",
    "DiscountKind",
    "ExperienceId",
    "Money",
    "Quantity",
]
