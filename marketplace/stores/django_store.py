"""Django ORM implementations of the marketplace stores."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError
from django.db.models import Q

from marketplace import models
from marketplace.domain import (
    Booking,
    BookingId,
    DiscountKind,
    Experience,
    ExperienceId,
    Money,
    NewBooking,
    PriceBreakdown,
    PromoCode,
    Quantity,
    TimeSlot,
)
from marketplace.domain.errors import PersistenceError
from marketplace.domain.value_objects import normalize_promo_code
from marketplace.stores.interfaces import BookingStore, ExperienceStore, PromoCodeStore

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("name", "description", "location", "category")


@contextmanager
def _database_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Store operation %s failed", operation)
        raise PersistenceError(operation) from exc


def _experience_to_domain(row: models.Experience) -> Experience:
    return Experience(
        id=ExperienceId(row.id),
        name=row.name,
        description=row.description,
        location=row.location,
        category=row.category,
        price=Money(row.price),
        image_url=row.image_url,
        available_dates=tuple(row.available_dates or ()),
        time_slots=tuple(
            TimeSlot(time=slot.time, available=slot.available, capacity=slot.capacity)
            for slot in row.time_slots.all()
        ),
        min_age=row.min_age,
        duration=row.duration or None,
    )


def _promo_code_to_domain(row: models.PromoCode) -> PromoCode:
    return PromoCode(
        code=row.code,
        kind=DiscountKind(row.kind),
        value=row.value,
        description=row.description,
    )


def _booking_to_domain(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        experience_id=ExperienceId(row.experience_id),
        experience_name=row.experience_name,
        full_name=row.full_name,
        email=row.email,
        date=row.date,
        time=row.time,
        quantity=Quantity(row.quantity),
        promo_code=row.promo_code or None,
        price=PriceBreakdown(
            subtotal=row.subtotal,
            taxes=row.taxes,
            discount=row.discount,
            total=row.total,
        ),
        booking_reference=row.booking_reference,
        created_at=row.created_at,
    )


class DjangoExperienceStore(ExperienceStore):
    """Database-backed experience catalog using Django ORM."""

    def list_experiences(self, search: str | None = None) -> list[Experience]:
        queryset = models.Experience.objects.prefetch_related("time_slots")
        if search:
            condition = Q()
            for field in SEARCH_FIELDS:
                condition |= Q(**{f"{field}__icontains": search})
            queryset = queryset.filter(condition)
        with _database_errors("list_experiences"):
            return [_experience_to_domain(row) for row in queryset]

    def get_experience(self, experience_id: ExperienceId) -> Experience | None:
        with _database_errors("get_experience"):
            row = (
                models.Experience.objects.prefetch_related("time_slots")
                .filter(pk=experience_id.value)
                .first()
            )
            return _experience_to_domain(row) if row else None


class DjangoPromoCodeStore(PromoCodeStore):
    """Database-backed promo code lookup using Django ORM."""

    def get_promo_code(self, code: str) -> PromoCode | None:
        with _database_errors("get_promo_code"):
            row = models.PromoCode.objects.filter(
                code=normalize_promo_code(code)
            ).first()
        return _promo_code_to_domain(row) if row else None


class DjangoBookingStore(BookingStore):
    """Database-backed booking store using Django ORM."""

    def add_booking(self, booking: NewBooking) -> Booking:
        with _database_errors("add_booking"):
            row = models.Booking.objects.create(
                experience_id=booking.experience_id.value,
                experience_name=booking.experience_name,
                full_name=booking.full_name,
                email=booking.email,
                date=booking.date,
                time=booking.time,
                quantity=booking.quantity.value,
                promo_code=booking.promo_code or "",
                subtotal=booking.price.subtotal,
                taxes=booking.price.taxes,
                discount=booking.price.discount,
                total=booking.price.total,
                booking_reference=booking.booking_reference,
                created_at=booking.created_at,
            )
        return _booking_to_domain(row)

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        with _database_errors("get_booking"):
            row = models.Booking.objects.filter(pk=booking_id.value).first()
        return _booking_to_domain(row) if row else None

    def count_bookings_for_slot(
        self, experience_id: ExperienceId, date: str, time: str
    ) -> int:
        with _database_errors("count_bookings_for_slot"):
            return models.Booking.objects.filter(
                experience_id=experience_id.value, date=date, time=time
            ).count()

    def reference_exists(self, booking_reference: str) -> bool:
        with _database_errors("reference_exists"):
            return models.Booking.objects.filter(
                booking_reference=booking_reference
            ).exists()
