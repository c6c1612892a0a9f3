"""Pytest configuration and shared fixtures."""

import uuid
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from marketplace.config import MarketplaceConfig
from marketplace.domain import DiscountKind, Experience, ExperienceId, Money, PromoCode, TimeSlot
from tests.fakes import InMemoryBookingStore, InMemoryExperienceStore, InMemoryPromoCodeStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def config() -> MarketplaceConfig:
    return MarketplaceConfig()


@pytest.fixture
def kayaking() -> Experience:
    return Experience(
        id=ExperienceId(uuid.uuid4()),
        name="Kayaking",
        description="Certified guide. Safety first with gear included.",
        location="Udupi",
        category="Udupi",
        price=Money(999),
        image_url="/images/experiences/kayaking.png",
        available_dates=("2025-11-01", "2025-11-02"),
        time_slots=(
            TimeSlot(time="9:00 AM", available=True, capacity=10),
            TimeSlot(time="3:00 PM", available=True, capacity=10),
        ),
        min_age=10,
        duration="2 hours",
    )


@pytest.fixture
def promo_codes() -> list[PromoCode]:
    return [
        PromoCode(
            code="SAVE10",
            kind=DiscountKind.PERCENTAGE,
            value=Decimal("10"),
            description="10% off",
        ),
        PromoCode(
            code="FLAT100",
            kind=DiscountKind.FIXED,
            value=Decimal("100"),
            description="Flat 100 off",
        ),
    ]


@pytest.fixture
def experience_store(kayaking) -> InMemoryExperienceStore:
    return InMemoryExperienceStore([kayaking])


@pytest.fixture
def promo_store(promo_codes) -> InMemoryPromoCodeStore:
    return InMemoryPromoCodeStore(promo_codes)


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def make_experience(db):
    """Create a persisted experience with the default time slots."""
    from marketplace.models import Experience as ExperienceRow
    from marketplace.models import TimeSlot as TimeSlotRow

    def factory(**overrides):
        attributes = {
            "name": "Kayaking",
            "description": "Curated small-group experience with a certified guide.",
            "location": "Udupi",
            "category": "Udupi",
            "price": 999,
            "image_url": "/images/experiences/kayaking.png",
            "available_dates": ["2025-11-01", "2025-11-02"],
            "min_age": 10,
            "duration": "2 hours",
        }
        attributes.update(overrides)
        row = ExperienceRow.objects.create(**attributes)
        for position, time in enumerate(["9:00 AM", "3:00 PM"]):
            TimeSlotRow.objects.create(
                experience=row, time=time, available=True, capacity=10, position=position
            )
        return row

    return factory


@pytest.fixture
def seeded_promo_codes(db):
    from marketplace.models import PromoCode as PromoCodeRow

    return [
        PromoCodeRow.objects.create(
            code="save10", kind="percentage", value=Decimal("10"), description="10% off"
        ),
        PromoCodeRow.objects.create(
            code="FLAT100", kind="fixed", value=Decimal("100"), description="Flat 100 off"
        ),
        PromoCodeRow.objects.create(
            code="HUGE", kind="fixed", value=Decimal("5000"), description="Staff special"
        ),
    ]
