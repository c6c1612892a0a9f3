"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid

import pytest

from marketplace.domain import BookingId, ExperienceId, Money, Quantity
from marketplace.domain.errors import (
    BookingNotFoundError,
    ErrorCode,
    ExperienceNotFoundError,
    PersistenceError,
)
from marketplace.domain.value_objects import normalize_promo_code


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(999).amount == 999

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_str_format(self):
        """Money string representation is the whole amount."""
        assert str(Money(1299)) == "1299"


class TestQuantity:
    """Tests for Quantity value object."""

    def test_quantity_accepts_one(self):
        assert Quantity(1).value == 1

    def test_quantity_rejects_zero(self):
        """Quantity raises ValueError below one."""
        with pytest.raises(ValueError):
            Quantity(0)


class TestIdentifiers:
    """Tests for ExperienceId and BookingId value objects."""

    def test_from_string_valid_uuid(self):
        """ExperienceId.from_string parses valid UUID."""
        raw = uuid.uuid4()
        assert ExperienceId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        """ExperienceId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            ExperienceId.from_string("not-a-uuid")

    def test_booking_id_str_is_uuid_text(self):
        raw = uuid.uuid4()
        assert str(BookingId(raw)) == str(raw)


class TestPromoCodeNormalization:
    def test_codes_are_upper_cased(self):
        assert normalize_promo_code("save10") == "SAVE10"
        assert normalize_promo_code("SAVE10") == "SAVE10"


class TestDomainErrors:
    """Tests for domain error codes and messages."""

    def test_experience_not_found_carries_id(self):
        error = ExperienceNotFoundError("abc")
        assert error.code is ErrorCode.EXPERIENCE_NOT_FOUND
        assert error.message == "Experience not found"
        assert error.experience_id == "abc"
        assert str(error) == "EXPERIENCE_NOT_FOUND: Experience not found"

    def test_booking_not_found_carries_id(self):
        error = BookingNotFoundError("xyz")
        assert error.code is ErrorCode.BOOKING_NOT_FOUND
        assert error.booking_id == "xyz"

    def test_persistence_error_hides_details(self):
        error = PersistenceError("add_booking")
        assert error.code is ErrorCode.PERSISTENCE_FAILURE
        assert "add_booking" not in error.message
        assert error.operation == "add_booking"
