"""Unit tests for the marketplace services.

These test pricing orchestration and domain error mapping against
in-memory stores.
Run with: pytest tests/test_services.py -v
"""

import re
import uuid
from decimal import Decimal

import pytest

from marketplace.config import MarketplaceConfig
from marketplace.domain import BookingRequest, Quantity
from marketplace.domain.errors import BookingNotFoundError, ExperienceNotFoundError
from marketplace.services import BookingService, CatalogService, PromoService


def _request(experience_id, quantity=2, promo_code=None) -> BookingRequest:
    return BookingRequest(
        experience_id=str(experience_id),
        full_name="Asha Rao",
        email="asha@example.com",
        date="2025-11-01",
        time="9:00 AM",
        quantity=Quantity(quantity),
        promo_code=promo_code,
    )


@pytest.fixture
def booking_service(experience_store, promo_store, booking_store, config) -> BookingService:
    return BookingService(experience_store, promo_store, booking_store, config)


@pytest.fixture
def promo_service(promo_store, config) -> PromoService:
    return PromoService(promo_store, config)


class TestCatalogService:
    """Tests for CatalogService."""

    def test_list_experiences_without_search_returns_all(self, experience_store, kayaking):
        assert CatalogService(experience_store).list_experiences() == [kayaking]

    def test_empty_search_returns_all(self, experience_store, kayaking):
        assert CatalogService(experience_store).list_experiences("") == [kayaking]

    def test_search_is_case_insensitive(self, experience_store, kayaking):
        service = CatalogService(experience_store)
        assert service.list_experiences("UDUPI") == [kayaking]
        assert service.list_experiences("goa") == []

    def test_get_experience_returns_experience(self, experience_store, kayaking):
        assert CatalogService(experience_store).get_experience(str(kayaking.id)) == kayaking

    def test_get_experience_invalid_id_raises_not_found(self, experience_store):
        """get_experience raises ExperienceNotFoundError for malformed UUID."""
        with pytest.raises(ExperienceNotFoundError):
            CatalogService(experience_store).get_experience("not-a-uuid")

    def test_get_experience_not_found_raises_error(self, experience_store):
        """get_experience raises ExperienceNotFoundError when store returns None."""
        with pytest.raises(ExperienceNotFoundError):
            CatalogService(experience_store).get_experience(str(uuid.uuid4()))


class TestCreateBooking:
    """Tests for BookingService.create_booking."""

    def test_prices_booking_without_promo(self, booking_service, kayaking):
        booking = booking_service.create_booking(_request(kayaking.id))
        assert booking.subtotal == 1998
        assert booking.taxes == 100
        assert booking.discount == 0
        assert booking.total == 2098
        assert booking.promo_code is None

    def test_percentage_promo(self, booking_service, kayaking):
        booking = booking_service.create_booking(_request(kayaking.id, promo_code="SAVE10"))
        assert booking.discount == 200
        assert booking.total == 1898
        assert booking.promo_code == "SAVE10"

    def test_promo_lookup_is_case_insensitive(self, booking_service, kayaking):
        lower = booking_service.create_booking(_request(kayaking.id, promo_code="save10"))
        upper = booking_service.create_booking(_request(kayaking.id, promo_code="SAVE10"))
        assert lower.discount == upper.discount == 200

    def test_fixed_promo(self, booking_service, kayaking):
        booking = booking_service.create_booking(_request(kayaking.id, promo_code="FLAT100"))
        assert booking.discount == 100
        assert booking.total == 1998

    def test_unknown_promo_is_ignored(self, booking_service, booking_store, kayaking):
        booking = booking_service.create_booking(_request(kayaking.id, promo_code="NOPE"))
        assert booking.discount == 0
        assert booking.total == 2098
        assert len(booking_store.bookings) == 1

    def test_captures_experience_name_and_reference(self, booking_service, kayaking):
        booking = booking_service.create_booking(_request(kayaking.id))
        assert booking.experience_name == "Kayaking"
        assert booking.experience_id == kayaking.id
        assert re.fullmatch(r"HUF[A-Z0-9]{6}", booking.booking_reference)
        assert booking.created_at.tzinfo is not None

    def test_unknown_experience_raises_and_writes_nothing(self, booking_service, booking_store):
        with pytest.raises(ExperienceNotFoundError):
            booking_service.create_booking(_request(uuid.uuid4()))
        assert booking_store.bookings == {}

    def test_malformed_experience_id_raises_not_found(self, booking_service, booking_store):
        with pytest.raises(ExperienceNotFoundError):
            booking_service.create_booking(_request("not-a-uuid"))
        assert booking_store.bookings == {}

    def test_tax_rate_comes_from_config(self, experience_store, promo_store, booking_store, kayaking):
        service = BookingService(
            experience_store,
            promo_store,
            booking_store,
            MarketplaceConfig(tax_rate=Decimal("0.18"), reference_prefix="BK"),
        )
        booking = service.create_booking(_request(kayaking.id, quantity=1))
        assert booking.taxes == 180
        assert booking.booking_reference.startswith("BK")

    def test_redraws_reference_already_issued(self, booking_service, booking_store, kayaking, monkeypatch):
        draws = iter(["HUFAAAAAA", "HUFBBBBBB"])
        monkeypatch.setattr(
            "marketplace.services.booking_service.generate_booking_reference",
            lambda prefix: next(draws),
        )
        booking_store.issued_references.add("HUFAAAAAA")
        booking = booking_service.create_booking(_request(kayaking.id))
        assert booking.booking_reference == "HUFBBBBBB"

    def test_gives_up_redrawing_after_configured_attempts(
        self, experience_store, promo_store, booking_store, kayaking, monkeypatch
    ):
        monkeypatch.setattr(
            "marketplace.services.booking_service.generate_booking_reference",
            lambda prefix: "HUFAAAAAA",
        )
        booking_store.issued_references.add("HUFAAAAAA")
        service = BookingService(
            experience_store, promo_store, booking_store, MarketplaceConfig(reference_attempts=3)
        )
        booking = service.create_booking(_request(kayaking.id))
        assert booking.booking_reference == "HUFAAAAAA"


class TestGetBooking:
    """Tests for BookingService.get_booking."""

    def test_returns_created_booking(self, booking_service, kayaking):
        created = booking_service.create_booking(_request(kayaking.id))
        fetched = booking_service.get_booking(str(created.id))
        assert fetched.booking_reference == created.booking_reference
        assert fetched.total == created.total
        assert fetched.experience_name == created.experience_name

    def test_invalid_id_raises_not_found(self, booking_service):
        with pytest.raises(BookingNotFoundError):
            booking_service.get_booking("not-a-uuid")

    def test_missing_booking_raises_not_found(self, booking_service):
        with pytest.raises(BookingNotFoundError):
            booking_service.get_booking(str(uuid.uuid4()))


class TestSlotAvailability:
    """Tests for the advisory slot count check."""

    def test_available_until_limit_reached(self, experience_store, promo_store, booking_store, kayaking):
        service = BookingService(
            experience_store, promo_store, booking_store, MarketplaceConfig(slot_booking_limit=2)
        )
        slot = (str(kayaking.id), "2025-11-01", "9:00 AM")
        assert service.check_slot_availability(*slot) is True
        service.create_booking(_request(kayaking.id))
        assert service.check_slot_availability(*slot) is True
        service.create_booking(_request(kayaking.id))
        assert service.check_slot_availability(*slot) is False
        assert service.check_slot_availability(str(kayaking.id), "2025-11-01", "3:00 PM") is True

    def test_creation_does_not_enforce_limit(self, experience_store, promo_store, booking_store, kayaking):
        service = BookingService(
            experience_store, promo_store, booking_store, MarketplaceConfig(slot_booking_limit=1)
        )
        service.create_booking(_request(kayaking.id))
        service.create_booking(_request(kayaking.id))
        assert len(booking_store.bookings) == 2

    def test_malformed_experience_id_raises_not_found(self, booking_service):
        with pytest.raises(ExperienceNotFoundError):
            booking_service.check_slot_availability("nope", "2025-11-01", "9:00 AM")


class TestValidatePromo:
    """Tests for PromoService.validate_promo."""

    def test_unknown_code_is_invalid(self, promo_service):
        result = promo_service.validate_promo("NOPE", 1998)
        assert result.valid is False
        assert result.discount == 0
        assert result.message == "Invalid promo code"

    def test_percentage_code(self, promo_service):
        result = promo_service.validate_promo("save10", 1998)
        assert result.valid is True
        assert result.discount == 200
        assert result.message == "10% off applied! You save ₹200"

    def test_fixed_code(self, promo_service):
        result = promo_service.validate_promo("FLAT100", 50)
        assert result.discount == 100

    def test_float_subtotal(self, promo_service):
        assert promo_service.validate_promo("SAVE10", 1998.0).discount == 200

    @pytest.mark.parametrize("code", ["SAVE10", "save10", "FLAT100"])
    def test_matches_discount_applied_at_booking(self, promo_service, booking_service, kayaking, code):
        booking = booking_service.create_booking(_request(kayaking.id, promo_code=code))
        preview = promo_service.validate_promo(code, booking.subtotal)
        assert preview.discount == booking.discount

    def test_unknown_code_still_books_without_discount(self, promo_service, booking_service, kayaking):
        preview = promo_service.validate_promo("BOGUS", 1998)
        booking = booking_service.create_booking(_request(kayaking.id, promo_code="BOGUS"))
        assert preview.valid is False
        assert booking.total == 2098
