from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from django.db import IntegrityError, transaction

from .models import Room


logger = logging.getLogger(__name__)

ROOM_ALREADY_EXISTS_MESSAGE = "Room with this number already exists."

UPDATABLE_FIELDS = ("room_number", "room_type", "has_sea_view")


class RoomError(Exception):
    """Base error type for room inventory errors."""


class RoomAlreadyExistsError(RoomError):
    """Raised when a room number is already taken by another room."""


@dataclass(frozen=True)
class RoomInput:
    room_number: int
    room_type: str
    has_sea_view: bool = False


def create_room(*, data: RoomInput) -> Room:
    """
    Create a room with a unique room number.
    - Checks for an existing room with the same number in-transaction.
    - Relies on the unique index as the final guard.
    """
    try:
        with transaction.atomic():
            if Room.objects.filter(room_number=data.room_number).exists():
                logger.warning("Rejected duplicate room number %s", data.room_number)
                raise RoomAlreadyExistsError(ROOM_ALREADY_EXISTS_MESSAGE)

            room = Room.objects.create(
                room_number=data.room_number,
                room_type=data.room_type,
                has_sea_view=data.has_sea_view,
            )
    except IntegrityError as exc:
        raise RoomAlreadyExistsError(ROOM_ALREADY_EXISTS_MESSAGE) from exc

    logger.info("Created room %s (id=%s)", room.room_number, room.id)
    return room


def list_rooms() -> list[Room]:
    return list(Room.objects.all())


def get_room(*, room_id: int) -> Room:
    return Room.objects.get(id=room_id)


def get_room_by_number(*, room_number: int) -> Room:
    return Room.objects.get(room_number=room_number)


def update_room(*, room_id: int, changes: dict[str, Any]) -> Room:
    """
    Apply a partial update to a room.

    A new room number is checked against every other room; the room's own
    number never counts as a duplicate. Nothing is written when the check
    fails.
    """
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown room fields: {', '.join(sorted(unknown))}")

    try:
        with transaction.atomic():
            room = Room.objects.select_for_update().get(id=room_id)

            new_number = changes.get("room_number")
            if new_number is not None and new_number != room.room_number:
                duplicate = Room.objects.filter(room_number=new_number).exclude(pk=room.pk).exists()
                if duplicate:
                    logger.warning("Rejected room %s renumbering to taken number %s", room.id, new_number)
                    raise RoomAlreadyExistsError(ROOM_ALREADY_EXISTS_MESSAGE)

            for field, value in changes.items():
                setattr(room, field, value)
            room.save(update_fields=[*changes, "updated_at"])
    except IntegrityError as exc:
        raise RoomAlreadyExistsError(ROOM_ALREADY_EXISTS_MESSAGE) from exc

    logger.info("Updated room %s (%s)", room.id, ", ".join(sorted(changes)) or "no fields")
    return room


def delete_room(*, room_id: int) -> None:
    with transaction.atomic():
        room = Room.objects.select_for_update().get(id=room_id)
        room.delete()
    logger.info("Deleted room id=%s", room_id)


def delete_room_by_number(*, room_number: int) -> None:
    with transaction.atomic():
        room = Room.objects.select_for_update().get(room_number=room_number)
        room.delete()
    logger.info("Deleted room %s", room_number)
