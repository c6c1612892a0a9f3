"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to handlers.exceptions
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from marketplace.cache_keys import EXPERIENCE_LIST_KEY, experience_detail_key
from marketplace.domain import ExperienceId
from marketplace.domain.errors import ExperienceNotFoundError
from marketplace.handlers import dependencies
from marketplace.handlers.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    ExperienceSerializer,
    PromoValidationRequestSerializer,
    PromoValidationSerializer,
    SlotAvailabilityQuerySerializer,
    format_validation_errors,
)


class ExperienceListView(APIView):
    """Handler for GET /api/experiences"""

    failure_message = "Failed to fetch experiences"

    def get(self, request: Request) -> Response:
        search = request.query_params.get("search", "").strip()
        if not search:
            cached = cache.get(EXPERIENCE_LIST_KEY)
            if cached is not None:
                return Response(cached)

        experiences = dependencies.get_catalog_service().list_experiences(search)
        data = ExperienceSerializer(experiences, many=True).data

        if not search:
            cache.set(
                EXPERIENCE_LIST_KEY,
                data,
                timeout=dependencies.get_config().catalog_cache_timeout,
            )
        return Response(data)


class ExperienceDetailView(APIView):
    """Handler for GET /api/experiences/{experience_id}"""

    failure_message = "Failed to fetch experience"

    def get(self, request: Request, experience_id: str) -> Response:
        try:
            parsed = ExperienceId.from_string(experience_id)
        except ValueError as exc:
            raise ExperienceNotFoundError(experience_id) from exc

        key = experience_detail_key(str(parsed))
        cached = cache.get(key)
        if cached is not None:
            return Response(cached)

        experience = dependencies.get_catalog_service().get_experience(str(parsed))
        data = ExperienceSerializer(experience).data
        cache.set(key, data, timeout=dependencies.get_config().catalog_cache_timeout)
        return Response(data)


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    failure_message = "Failed to create booking"

    def post(self, request: Request) -> Response:
        serializer = BookingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": format_validation_errors(serializer.errors)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        booking = dependencies.get_booking_service().create_booking(
            serializer.to_booking_request()
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}"""

    failure_message = "Failed to fetch booking"

    def get(self, request: Request, booking_id: str) -> Response:
        booking = dependencies.get_booking_service().get_booking(booking_id)
        return Response(BookingSerializer(booking).data)


class PromoValidateView(APIView):
    """Handler for POST /api/promo/validate"""

    failure_message = "Failed to validate promo code"

    def post(self, request: Request) -> Response:
        serializer = PromoValidationRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    "error": "Invalid request",
                    "details": format_validation_errors(serializer.errors),
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = dependencies.get_promo_service().validate_promo(
            serializer.validated_data["code"],
            serializer.validated_data["subtotal"],
        )
        return Response(PromoValidationSerializer(result).data)


class SlotAvailabilityView(APIView):
    """Handler for GET /api/slots/availability"""

    failure_message = "Failed to check availability"

    def get(self, request: Request) -> Response:
        serializer = SlotAvailabilityQuerySerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(
                {"error": format_validation_errors(serializer.errors)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        params = serializer.validated_data
        available = dependencies.get_booking_service().check_slot_availability(
            params["experienceId"], params["date"], params["time"]
        )
        return Response({"available": available})
