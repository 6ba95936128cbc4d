from django.urls import path

from .api import room_by_number_api, room_detail_api, rooms_api


app_name = "rooms"

urlpatterns = [
    path("rooms/", rooms_api, name="rooms_api"),
    path(
        "rooms/byRoomNumber/<str:room_number>/",
        room_by_number_api,
        name="room_by_number_api",
    ),
    path("rooms/<str:room_id>/", room_detail_api, name="room_detail_api"),
]
