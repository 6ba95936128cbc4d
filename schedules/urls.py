from django.urls import path

from .api import schedule_detail_api, schedules_api


app_name = "schedules"

urlpatterns = [
    path("schedule/", schedules_api, name="schedules_api"),
    path("schedule/<str:schedule_id>/", schedule_detail_api, name="schedule_detail_api"),
]
