"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in marketplace/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from marketplace.domain.value_objects import (
    BookingId,
    DiscountKind,
    ExperienceId,
    Money,
    Quantity,
)


@dataclass(frozen=True)
class TimeSlot:
    """A bookable time of day offered by an experience."""

    time: str
    available: bool
    capacity: int | None = None


@dataclass(frozen=True)
class Experience:
    """Domain representation of an Experience."""

    id: ExperienceId
    name: str
    description: str
    location: str
    category: str
    price: Money
    image_url: str
    available_dates: tuple[str, ...] = ()
    time_slots: tuple[TimeSlot, ...] = ()
    min_age: int | None = None
    duration: str | None = None


@dataclass(frozen=True)
class PromoCode:
    """Domain representation of a PromoCode."""

    code: str
    kind: DiscountKind
    value: Decimal
    description: str


@dataclass(frozen=True)
class BookingRequest:
    """A validated request to book an experience."""

    experience_id: str
    full_name: str
    email: str
    date: str
    time: str
    quantity: Quantity
    promo_code: str | None = None


@dataclass(frozen=True)
class PriceBreakdown:
    """Amounts charged for a booking, in whole currency units."""

    subtotal: int
    taxes: int
    discount: int
    total: int


@dataclass(frozen=True)
class NewBooking:
    """A priced booking that has not been persisted yet."""

    experience_id: ExperienceId
    experience_name: str
    full_name: str
    email: str
    date: str
    time: str
    quantity: Quantity
    promo_code: str | None
    price: PriceBreakdown
    booking_reference: str
    created_at: datetime


@dataclass(frozen=True)
class Booking:
    """Domain representation of a persisted Booking."""

    id: BookingId
    experience_id: ExperienceId
    experience_name: str
    full_name: str
    email: str
    date: str
    time: str
    quantity: Quantity
    promo_code: str | None
    price: PriceBreakdown
    booking_reference: str
    created_at: datetime

    @property
    def subtotal(self) -> int:
        return self.price.subtotal

    @property
    def taxes(self) -> int:
        return self.price.taxes

    @property
    def discount(self) -> int:
        return self.price.discount

    @property
    def total(self) -> int:
        return self.price.total


@dataclass(frozen=True)
class PromoValidation:
    """Outcome of previewing a promo code against a subtotal."""

    valid: bool
    discount: int
    message: str
