"""Serializers for request validation and API responses.

Field names are camelCase to match the JSON contract of the web client.
"""

from rest_framework import serializers

from marketplace.domain import BookingRequest, Quantity

# Largest quantity the bookings table column holds.
MAX_QUANTITY = 2**31 - 1


class TimeSlotSerializer(serializers.Serializer):
    """Serializer for TimeSlot domain model."""

    time = serializers.CharField()
    available = serializers.BooleanField()
    capacity = serializers.IntegerField(allow_null=True)


class ExperienceSerializer(serializers.Serializer):
    """Serializer for Experience domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    category = serializers.CharField()
    price = serializers.IntegerField(source="price.amount")
    imageUrl = serializers.CharField(source="image_url")
    availableDates = serializers.ListField(
        child=serializers.CharField(), source="available_dates"
    )
    timeSlots = TimeSlotSerializer(many=True, source="time_slots")
    minAge = serializers.IntegerField(source="min_age", allow_null=True)
    duration = serializers.CharField(allow_null=True)


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model.

    The identifier is exposed as both ``id`` and ``_id``.
    """

    id = serializers.UUIDField(source="id.value")
    experienceId = serializers.UUIDField(source="experience_id.value")
    experienceName = serializers.CharField(source="experience_name")
    fullName = serializers.CharField(source="full_name")
    email = serializers.EmailField()
    date = serializers.CharField()
    time = serializers.CharField()
    quantity = serializers.IntegerField(source="quantity.value")
    promoCode = serializers.CharField(source="promo_code", allow_null=True)
    subtotal = serializers.IntegerField()
    taxes = serializers.IntegerField()
    discount = serializers.IntegerField()
    total = serializers.IntegerField()
    bookingReference = serializers.CharField(source="booking_reference")
    createdAt = serializers.DateTimeField(source="created_at")

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["_id"] = data["id"]
        return data


class BookingCreateSerializer(serializers.Serializer):
    """Validates POST /api/bookings bodies."""

    experienceId = serializers.CharField(max_length=36)
    fullName = serializers.CharField(
        min_length=2,
        max_length=255,
        error_messages={"min_length": "Name must be at least 2 characters"},
    )
    email = serializers.EmailField(
        max_length=254,
        error_messages={"invalid": "Please enter a valid email"},
    )
    date = serializers.CharField(max_length=10)
    time = serializers.CharField(max_length=20)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    promoCode = serializers.CharField(
        max_length=64, required=False, allow_blank=True, allow_null=True
    )
    agreeToTerms = serializers.BooleanField()

    def validate_agreeToTerms(self, value: bool) -> bool:
        if value is not True:
            raise serializers.ValidationError("You must agree to terms and conditions")
        return value

    def to_booking_request(self) -> BookingRequest:
        data = self.validated_data
        return BookingRequest(
            experience_id=data["experienceId"],
            full_name=data["fullName"],
            email=data["email"],
            date=data["date"],
            time=data["time"],
            quantity=Quantity(data["quantity"]),
            promo_code=data.get("promoCode") or None,
        )


class PromoValidationRequestSerializer(serializers.Serializer):
    """Validates POST /api/promo/validate bodies."""

    code = serializers.CharField(max_length=64)
    subtotal = serializers.FloatField()


class PromoValidationSerializer(serializers.Serializer):
    """Serializer for PromoValidation domain model."""

    valid = serializers.BooleanField()
    discount = serializers.IntegerField()
    message = serializers.CharField()


class SlotAvailabilityQuerySerializer(serializers.Serializer):
    """Validates GET /api/slots/availability query parameters."""

    experienceId = serializers.CharField(max_length=36)
    date = serializers.CharField(max_length=10)
    time = serializers.CharField(max_length=20)


def format_validation_errors(errors) -> str:
    """Flatten serializer errors into one readable line.

    ``{"email": ["Please enter a valid email"]}`` becomes
    ``"email: Please enter a valid email"``.
    """
    parts = []
    for field, messages in errors.items():
        if isinstance(messages, dict):
            parts.append(format_validation_errors(messages))
            continue
        if not isinstance(messages, (list, tuple)):
            messages = [messages]
        text = " ".join(str(message) for message in messages)
        parts.append(text if field == "non_field_errors" else f"{field}: {text}")
    return "; ".join(parts)
