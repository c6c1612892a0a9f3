from django.contrib import admin

from marketplace.models import Booking, Experience, PromoCode, TimeSlot


class TimeSlotInline(admin.TabularInline):
    model = TimeSlot
    extra = 1


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "category", "price", "created_at"]
    search_fields = ["name", "description", "location", "category"]
    list_filter = ["category"]
    inlines = [TimeSlotInline]


@admin.register(PromoCode)
class PromoCodeAdmin(admin.ModelAdmin):
    list_display = ["code", "kind", "value", "description"]
    search_fields = ["code"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = [
        "booking_reference",
        "experience_name",
        "full_name",
        "date",
        "time",
        "quantity",
        "total",
        "created_at",
    ]
    list_filter = ["experience__name", "date"]
    search_fields = ["booking_reference", "full_name", "email"]
    readonly_fields = [field.name for field in Booking._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
