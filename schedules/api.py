from __future__ import annotations

from datetime import date as date_type
from datetime import datetime
from datetime import timezone as dt_timezone
from typing import Any

from django.http import JsonResponse
from django.utils.dateparse import parse_date, parse_datetime
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from config.http import (
    INVALID_ID_MESSAGE,
    InvalidPayload,
    error_response,
    parse_id,
    parse_json_object,
    unknown_properties,
    validation_error,
)

from .models import Schedule
from .services import (
    RoomAlreadyBookedError,
    ScheduleInput,
    create_schedule,
    delete_schedule,
    get_schedule,
    list_schedules,
    update_schedule,
)


SCHEDULE_NOT_FOUND_MESSAGE = "Schedule not found."

SCHEDULE_PROPERTIES = ("roomId", "date")


def _parse_date(value: Any) -> datetime | date_type | None:
    """
    Accept ISO-8601 date-times (``2025-03-01T10:00:00Z``) and plain dates
    (``2025-03-01``). Returns None for anything else.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    try:
        return parse_datetime(value) or parse_date(value)
    except ValueError:
        return None


def format_date(value: datetime) -> str:
    value = value.astimezone(dt_timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def schedule_to_dict(schedule: Schedule) -> dict[str, Any]:
    return {
        "id": schedule.id,
        "roomId": schedule.room_id,
        "date": format_date(schedule.date),
    }


def _clean_schedule_payload(payload: dict[str, Any]) -> tuple[ScheduleInput | None, list[str]]:
    errors = unknown_properties(payload, SCHEDULE_PROPERTIES)

    room_id = None
    if "roomId" not in payload:
        errors.append("roomId is required")
    else:
        room_id = parse_id(payload["roomId"])
        if room_id is None:
            errors.append("roomId must be a valid id")

    booking_date = None
    if "date" not in payload:
        errors.append("date is required")
    else:
        booking_date = _parse_date(payload["date"])
        if booking_date is None:
            errors.append("date must be a valid ISO 8601 date string")

    if errors:
        return None, errors
    return ScheduleInput(room_id=room_id, date=booking_date), []


@csrf_exempt
@require_http_methods(["GET", "POST"])
def schedules_api(request):
    """
    GET  /api/schedule/?roomId=<id>&date=YYYY-MM-DD
         Both filters are optional; ``date`` matches the whole UTC day.
    POST /api/schedule/
    Payload (JSON):
      - roomId: int
      - date: ISO-8601 date or date-time, stored as UTC midnight
    """
    if request.method == "GET":
        errors = unknown_properties(request.GET.keys(), SCHEDULE_PROPERTIES)

        room_id = None
        room_id_str = request.GET.get("roomId", "").strip()
        if room_id_str:
            room_id = parse_id(room_id_str)
            if room_id is None:
                errors.append("roomId must be a valid id")

        on_date = None
        date_str = request.GET.get("date", "").strip()
        if date_str:
            on_date = _parse_date(date_str)
            if on_date is None:
                errors.append("date must be a valid ISO 8601 date string")

        if errors:
            return validation_error(errors)

        schedules = list_schedules(room_id=room_id, on_date=on_date)
        return JsonResponse([schedule_to_dict(s) for s in schedules], safe=False)

    try:
        payload = parse_json_object(request)
    except InvalidPayload as exc:
        return error_response(str(exc), status=400)

    data, errors = _clean_schedule_payload(payload)
    if errors:
        return validation_error(errors)

    try:
        schedule = create_schedule(data=data)
    except RoomAlreadyBookedError as exc:
        return error_response(str(exc), status=409)

    return JsonResponse(schedule_to_dict(schedule), status=201)


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def schedule_detail_api(request, schedule_id: str):
    """
    GET    /api/schedule/<id>/
    PUT    /api/schedule/<id>/  - payload as for creation, both properties required.
    DELETE /api/schedule/<id>/
    """
    pk = parse_id(schedule_id)
    if pk is None:
        return error_response(INVALID_ID_MESSAGE, status=400)

    if request.method == "GET":
        try:
            schedule = get_schedule(schedule_id=pk)
        except Schedule.DoesNotExist:
            return error_response(SCHEDULE_NOT_FOUND_MESSAGE, status=404)
        return JsonResponse(schedule_to_dict(schedule))

    if request.method == "DELETE":
        try:
            delete_schedule(schedule_id=pk)
        except Schedule.DoesNotExist:
            return error_response(SCHEDULE_NOT_FOUND_MESSAGE, status=404)
        return JsonResponse({"success": True, "message": "Schedule deleted."})

    try:
        payload = parse_json_object(request)
    except InvalidPayload as exc:
        return error_response(str(exc), status=400)

    data, errors = _clean_schedule_payload(payload)
    if errors:
        return validation_error(errors)

    try:
        schedule = update_schedule(schedule_id=pk, data=data)
    except Schedule.DoesNotExist:
        return error_response(SCHEDULE_NOT_FOUND_MESSAGE, status=404)
    except RoomAlreadyBookedError as exc:
        return error_response(str(exc), status=409)

    return JsonResponse(schedule_to_dict(schedule))
