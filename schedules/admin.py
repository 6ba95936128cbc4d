from django import forms
from django.contrib import admin

from .models import Schedule, normalize_booking_date


class ScheduleAdminForm(forms.ModelForm):
    class Meta:
        model = Schedule
        fields = ("room", "date")

    def clean_date(self):
        value = self.cleaned_data.get("date")
        if value is None:
            return value
        return normalize_booking_date(value)


@admin.register(Schedule)
class ScheduleAdmin(admin.ModelAdmin):
    form = ScheduleAdminForm
    list_display = ("id", "room_id", "booking_day", "created_at")
    list_filter = ("date",)
    search_fields = ("room__room_number",)
    ordering = ("-date", "room_id")
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("room",)

    @admin.display(description="Date (UTC)", ordering="date")
    def booking_day(self, obj: Schedule) -> str:
        return f"{obj.date:%Y-%m-%d}"

    def save_model(self, request, obj, form, change):
        obj.full_clean()
        return super().save_model(request, obj, form, change)
