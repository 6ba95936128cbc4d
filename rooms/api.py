from __future__ import annotations

from typing import Any

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from config.http import (
    INVALID_ID_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    InvalidPayload,
    error_response,
    parse_id,
    parse_int,
    parse_json_object,
    unknown_properties,
    validation_error,
)

from .models import MAX_ROOM_NUMBER, Room, RoomType
from .services import (
    RoomAlreadyExistsError,
    RoomInput,
    create_room,
    delete_room,
    delete_room_by_number,
    get_room,
    get_room_by_number,
    list_rooms,
    update_room,
)


ROOM_NOT_FOUND_MESSAGE = "Room not found."

# JSON property -> model field
ROOM_FIELDS = {
    "roomNumber": "room_number",
    "roomType": "room_type",
    "hasSeaView": "has_sea_view",
}


def room_to_dict(room: Room) -> dict[str, Any]:
    return {
        "id": room.id,
        "roomNumber": room.room_number,
        "roomType": room.room_type,
        "hasSeaView": room.has_sea_view,
    }


def _clean_room_payload(payload: dict[str, Any], *, partial: bool) -> tuple[dict[str, Any], list[str]]:
    """
    Validate a room body and translate it to model field names.
    With partial=False every required property must be present.
    """
    errors = unknown_properties(payload, ROOM_FIELDS)
    cleaned: dict[str, Any] = {}

    if "roomNumber" in payload:
        room_number = payload["roomNumber"]
        if isinstance(room_number, bool) or not isinstance(room_number, int):
            errors.append("roomNumber must be an integer number")
        elif room_number <= 0:
            errors.append("roomNumber must be a positive number")
        elif room_number > MAX_ROOM_NUMBER:
            errors.append(f"roomNumber must not be greater than {MAX_ROOM_NUMBER}")
        else:
            cleaned["room_number"] = room_number
    elif not partial:
        errors.append("roomNumber is required")

    if "roomType" in payload:
        room_type = payload["roomType"]
        if room_type not in RoomType.values:
            errors.append(f"roomType must be one of: {', '.join(RoomType.values)}")
        else:
            cleaned["room_type"] = room_type
    elif not partial:
        errors.append("roomType is required")

    if "hasSeaView" in payload:
        has_sea_view = payload["hasSeaView"]
        if not isinstance(has_sea_view, bool):
            errors.append("hasSeaView must be a boolean value")
        else:
            cleaned["has_sea_view"] = has_sea_view

    return cleaned, errors


@csrf_exempt
@require_http_methods(["GET", "POST"])
def rooms_api(request):
    """
    GET  /api/rooms/  - list every room.
    POST /api/rooms/  - create a room.
    Payload (JSON):
      - roomNumber: positive int, unique
      - roomType: single|double|suite
      - hasSeaView: bool (optional, default false)
    """
    if request.method == "GET":
        return JsonResponse([room_to_dict(room) for room in list_rooms()], safe=False)

    try:
        payload = parse_json_object(request)
    except InvalidPayload as exc:
        return error_response(str(exc), status=400)

    cleaned, errors = _clean_room_payload(payload, partial=False)
    if errors:
        return validation_error(errors)

    try:
        room = create_room(data=RoomInput(**cleaned))
    except RoomAlreadyExistsError as exc:
        return error_response(str(exc), status=409)

    return JsonResponse(room_to_dict(room), status=201)


@csrf_exempt
@require_http_methods(["GET", "PATCH", "DELETE"])
def room_detail_api(request, room_id: str):
    """
    GET    /api/rooms/<id>/
    PATCH  /api/rooms/<id>/  - partial update, any subset of the room properties.
    DELETE /api/rooms/<id>/
    """
    pk = parse_id(room_id)
    if pk is None:
        return error_response(INVALID_ID_MESSAGE, status=400)

    if request.method == "GET":
        try:
            room = get_room(room_id=pk)
        except Room.DoesNotExist:
            return error_response(ROOM_NOT_FOUND_MESSAGE, status=404)
        return JsonResponse(room_to_dict(room))

    if request.method == "DELETE":
        try:
            delete_room(room_id=pk)
        except Room.DoesNotExist:
            return error_response(ROOM_NOT_FOUND_MESSAGE, status=404)
        return JsonResponse({"success": True, "message": "Room deleted."})

    try:
        payload = parse_json_object(request)
    except InvalidPayload as exc:
        return error_response(str(exc), status=400)

    cleaned, errors = _clean_room_payload(payload, partial=True)
    if errors:
        return validation_error(errors)

    try:
        room = update_room(room_id=pk, changes=cleaned)
    except Room.DoesNotExist:
        return error_response(ROOM_NOT_FOUND_MESSAGE, status=404)
    except RoomAlreadyExistsError as exc:
        return error_response(str(exc), status=409)

    return JsonResponse(room_to_dict(room))


@csrf_exempt
@require_http_methods(["GET", "DELETE"])
def room_by_number_api(request, room_number: str):
    """
    GET    /api/rooms/byRoomNumber/<roomNumber>/
    DELETE /api/rooms/byRoomNumber/<roomNumber>/
    """
    number = parse_int(room_number)
    if number is None:
        return error_response(INVALID_NUMBER_MESSAGE, status=400)
    if not 0 < number <= MAX_ROOM_NUMBER:
        return error_response(ROOM_NOT_FOUND_MESSAGE, status=404)

    try:
        if request.method == "DELETE":
            delete_room_by_number(room_number=number)
            return JsonResponse({"success": True, "message": "Room deleted."})
        room = get_room_by_number(room_number=number)
    except Room.DoesNotExist:
        return error_response(ROOM_NOT_FOUND_MESSAGE, status=404)

    return JsonResponse(room_to_dict(room))
