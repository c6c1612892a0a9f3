"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from marketplace.domain import Booking, BookingId, Experience, ExperienceId, NewBooking, PromoCode


class ExperienceStore(ABC):
    """Interface for the experience catalog."""

    @abstractmethod
    def list_experiences(self, search: str | None = None) -> list[Experience]:
        """Return experiences in insertion order.

        When ``search`` is given, only experiences whose name, description,
        location or category contain it (case-insensitively) are returned.
        """
        ...

    @abstractmethod
    def get_experience(self, experience_id: ExperienceId) -> Experience | None:
        """Return an experience by ID, or None if not found."""
        ...


class PromoCodeStore(ABC):
    """Interface for promo code lookups."""

    @abstractmethod
    def get_promo_code(self, code: str) -> PromoCode | None:
        """Return the promo code matching ``code`` case-insensitively, or None."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def add_booking(self, booking: NewBooking) -> Booking:
        """Persist a new booking and return it with its assigned ID."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def count_bookings_for_slot(
        self, experience_id: ExperienceId, date: str, time: str
    ) -> int:
        """Count bookings made for one experience, date and time."""
        ...

    @abstractmethod
    def reference_exists(self, booking_reference: str) -> bool:
        """Check if a booking reference has already been issued."""
        ...
