"""Seed the demo catalog and promo codes.

Usage: python manage.py seed_catalog [--days 30]
"""

import logging
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from marketplace.models import Experience, PromoCode, TimeSlot

logger = logging.getLogger(__name__)

DEFAULT_TIME_SLOTS = [
    {"time": "6:00 AM", "available": True, "capacity": 8},
    {"time": "9:00 AM", "available": True, "capacity": 10},
    {"time": "12:00 PM", "available": True, "capacity": 6},
    {"time": "3:00 PM", "available": True, "capacity": 10},
    {"time": "6:00 PM", "available": True, "capacity": 8},
]

KAYAKING_DESCRIPTION = (
    "Curated small-group experience. Certified guide. Safety first with gear "
    "included. Helmet and life jackets along with an expert will accompany you "
    "in kayaking."
)
NANDI_HILLS_DESCRIPTION = (
    "Early morning trek to catch the breathtaking sunrise from Nandi Hills with "
    "a certified guide and refreshments."
)


def _kayaking(image: str) -> dict:
    return {
        "name": "Kayaking",
        "description": KAYAKING_DESCRIPTION,
        "location": "Udupi",
        "category": "Udupi",
        "price": 999,
        "image_url": f"/images/experiences/{image}",
        "min_age": 10,
        "duration": "2 hours",
    }


def _nandi_hills(image: str) -> dict:
    return {
        "name": "Nandi Hills Sunrise",
        "description": NANDI_HILLS_DESCRIPTION,
        "location": "Bangalore",
        "category": "Bangalore",
        "price": 899,
        "image_url": f"/images/experiences/{image}",
        "min_age": 12,
        "duration": "4 hours",
    }


EXPERIENCES = [
    _kayaking("kayaking.png"),
    _kayaking("Kayaking2.png"),
    _kayaking("KayaKing3.png"),
    _kayaking("KayaKing4.png"),
    _kayaking("Kayaking5.png"),
    _nandi_hills("nandi-hills.jpg"),
    _nandi_hills("nandi-hills2.png"),
    {
        "name": "Coffee Trail",
        "description": "Explore coffee plantations in Coorg and learn the process from bean to cup.",
        "location": "Coorg",
        "category": "Coorg",
        "price": 1299,
        "image_url": "/images/experiences/coffee-trail.jpg",
        "min_age": 10,
        "duration": "3 hours",
    },
    {
        "name": "Boat Cruise",
        "description": "Relaxing boat cruise in Goa with scenic views and refreshments included.",
        "location": "Goa",
        "category": "Goa",
        "price": 999,
        "image_url": "/images/experiences/boat-cruise.png",
        "min_age": 8,
        "duration": "2 hours",
    },
    {
        "name": "Bungee Jumping",
        "description": "Experience the ultimate adrenaline rush with professional supervision in Rishikesh.",
        "location": "Rishikesh",
        "category": "Rishikesh",
        "price": 3499,
        "image_url": "/images/experiences/bungee-jumping.png",
        "min_age": 18,
        "duration": "1 hour",
    },
]

PROMO_CODES = [
    {
        "code": "SAVE10",
        "kind": PromoCode.Kind.PERCENTAGE,
        "value": Decimal("10"),
        "description": "10% off",
    },
    {
        "code": "WELCOME20",
        "kind": PromoCode.Kind.PERCENTAGE,
        "value": Decimal("20"),
        "description": "Welcome offer 20% off",
    },
    {
        "code": "FLAT100",
        "kind": PromoCode.Kind.FIXED,
        "value": Decimal("100"),
        "description": "Flat ₹100 off",
    },
]


def upcoming_dates(days: int) -> list[str]:
    """ISO dates for the ``days`` days after today."""
    today = timezone.localdate()
    return [(today + timedelta(days=offset)).isoformat() for offset in range(1, days + 1)]


class Command(BaseCommand):
    help = "Seed demo experiences and promo codes. Experiences are skipped if any exist."

    def add_arguments(self, parser):
        parser.add_argument(
            "--days",
            type=int,
            default=30,
            help="Number of bookable days starting tomorrow.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self._seed_promo_codes()

        if Experience.objects.exists():
            self.stdout.write("Experiences already exist, skipping seed.")
            return

        available_dates = upcoming_dates(options["days"])
        for attributes in EXPERIENCES:
            experience = Experience.objects.create(
                available_dates=available_dates, **attributes
            )
            TimeSlot.objects.bulk_create(
                TimeSlot(experience=experience, position=position, **slot)
                for position, slot in enumerate(DEFAULT_TIME_SLOTS)
            )

        logger.info("Seeded %d experiences", len(EXPERIENCES))
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(EXPERIENCES)} experiences."))

    def _seed_promo_codes(self) -> None:
        for attributes in PROMO_CODES:
            code = attributes["code"]
            defaults = {key: value for key, value in attributes.items() if key != "code"}
            _, created = PromoCode.objects.update_or_create(code=code, defaults=defaults)
            logger.info("Promo code %s %s", code, "created" if created else "updated")
