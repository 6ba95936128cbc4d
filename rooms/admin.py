from django.contrib import admin

from .models import Room


admin.site.site_header = "Hotel Rooms Admin"
admin.site.site_title = "Hotel Rooms Admin"
admin.site.index_title = "Rooms & Schedules"


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("room_number", "room_type", "has_sea_view", "created_at")
    list_filter = ("room_type", "has_sea_view")
    search_fields = ("room_number",)
    ordering = ("room_number",)
    readonly_fields = ("created_at", "updated_at")
