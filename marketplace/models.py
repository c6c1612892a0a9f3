"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models
from django.utils import timezone


class Experience(models.Model):
    """Persistence model for experiences."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    category = models.CharField(max_length=100, blank=True)
    price = models.PositiveIntegerField()
    image_url = models.CharField(max_length=500, blank=True)
    available_dates = models.JSONField(default=list, blank=True)
    min_age = models.PositiveSmallIntegerField(blank=True, null=True)
    duration = models.CharField(max_length=50, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="experience_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"


class TimeSlot(models.Model):
    """Persistence model for an experience's time slots."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    experience = models.ForeignKey(
        Experience, on_delete=models.CASCADE, related_name="time_slots"
    )
    time = models.CharField(max_length=20)
    available = models.BooleanField(default=True)
    capacity = models.PositiveIntegerField(blank=True, null=True)
    position = models.PositiveSmallIntegerField(default=0)

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["experience", "position"], name="timeslot_position_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.experience.name} - {self.time}"


class PromoCode(models.Model):
    """Persistence model for promo codes."""

    class Kind(models.TextChoices):
        PERCENTAGE = "percentage", "Percentage"
        FIXED = "fixed", "Fixed amount"

    code = models.CharField(max_length=64, unique=True)
    kind = models.CharField(max_length=20, choices=Kind.choices)
    value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Percentage points for percentage codes, amount for fixed codes.",
    )
    description = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    def save(self, *args, **kwargs):
        self.code = self.code.upper()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.code


class Booking(models.Model):
    """Persistence model for bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    experience = models.ForeignKey(
        Experience, on_delete=models.PROTECT, related_name="bookings"
    )
    experience_name = models.CharField(max_length=255)
    full_name = models.CharField(max_length=255)
    email = models.EmailField()
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=20)
    quantity = models.PositiveIntegerField()
    promo_code = models.CharField(max_length=64, blank=True)
    subtotal = models.BigIntegerField()
    taxes = models.BigIntegerField()
    discount = models.BigIntegerField(default=0)
    total = models.BigIntegerField()
    booking_reference = models.CharField(max_length=32, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["experience", "date", "time"], name="booking_slot_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.booking_reference} - {self.experience_name}"
