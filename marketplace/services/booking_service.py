"""Booking service - pricing and recording bookings.

Bookings are priced from the experience's current price at creation time.
An unknown promo code is ignored here; callers that need to report it use
PromoService.validate_promo first.
"""

import logging
from datetime import datetime, timezone

from marketplace.config import MarketplaceConfig
from marketplace.domain import (
    Booking,
    BookingId,
    BookingRequest,
    ExperienceId,
    NewBooking,
)
from marketplace.domain.errors import BookingNotFoundError, ExperienceNotFoundError
from marketplace.domain.pricing import (
    calculate_discount,
    calculate_price_breakdown,
    generate_booking_reference,
)
from marketplace.domain.value_objects import normalize_promo_code
from marketplace.stores.interfaces import BookingStore, ExperienceStore, PromoCodeStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for creating and retrieving bookings."""

    def __init__(
        self,
        experiences: ExperienceStore,
        promo_codes: PromoCodeStore,
        bookings: BookingStore,
        config: MarketplaceConfig,
    ) -> None:
        self._experiences = experiences
        self._promo_codes = promo_codes
        self._bookings = bookings
        self._config = config

    def create_booking(self, request: BookingRequest) -> Booking:
        """Price and persist a booking.

        Raises:
            ExperienceNotFoundError: If the experience does not exist. Nothing
                is written in that case.
            PersistenceError: If the store fails.
        """
        try:
            experience_id = ExperienceId.from_string(request.experience_id)
        except ValueError as exc:
            raise ExperienceNotFoundError(request.experience_id) from exc

        experience = self._experiences.get_experience(experience_id)
        if experience is None:
            raise ExperienceNotFoundError(request.experience_id)

        subtotal = experience.price.amount * request.quantity.value
        promo_code = normalize_promo_code(request.promo_code) if request.promo_code else None
        discount = 0
        if promo_code:
            promo = self._promo_codes.get_promo_code(promo_code)
            if promo is None:
                logger.info("Ignoring unknown promo code %s", promo_code)
            discount = calculate_discount(promo, subtotal)

        price = calculate_price_breakdown(
            experience.price, request.quantity, discount, self._config.tax_rate
        )

        booking = self._bookings.add_booking(
            NewBooking(
                experience_id=experience.id,
                experience_name=experience.name,
                full_name=request.full_name,
                email=request.email,
                date=request.date,
                time=request.time,
                quantity=request.quantity,
                promo_code=promo_code,
                price=price,
                booking_reference=self._issue_reference(),
                created_at=datetime.now(timezone.utc),
            )
        )
        logger.info(
            "Booking %s created with reference %s (total %s)",
            booking.id,
            booking.booking_reference,
            booking.total,
        )
        return booking

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            BookingNotFoundError: If the ID is malformed or the booking does
                not exist.
        """
        try:
            parsed = BookingId.from_string(booking_id)
        except ValueError as exc:
            raise BookingNotFoundError(booking_id) from exc

        booking = self._bookings.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def check_slot_availability(self, experience_id: str, date: str, time: str) -> bool:
        """Advisory check that a slot has fewer bookings than the configured limit.

        The count and any later booking are not atomic; create_booking does
        not call this.
        """
        try:
            parsed = ExperienceId.from_string(experience_id)
        except ValueError as exc:
            raise ExperienceNotFoundError(experience_id) from exc

        count = self._bookings.count_bookings_for_slot(parsed, date, time)
        return count < self._config.slot_booking_limit

    def _issue_reference(self) -> str:
        reference = generate_booking_reference(self._config.reference_prefix)
        for _ in range(self._config.reference_attempts - 1):
            if not self._bookings.reference_exists(reference):
                break
            logger.warning("Booking reference %s already issued, drawing again", reference)
            reference = generate_booking_reference(self._config.reference_prefix)
        return reference
