from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime

from django.db import IntegrityError, transaction

from .models import Schedule, normalize_booking_date


logger = logging.getLogger(__name__)

ROOM_ALREADY_BOOKED_MESSAGE = "Room is already booked for this date."


class ScheduleError(Exception):
    """Base error type for schedule domain errors."""


class RoomAlreadyBookedError(ScheduleError):
    """Raised when a room already has a schedule on the requested day."""


@dataclass(frozen=True)
class ScheduleInput:
    room_id: int
    date: datetime | date_type


def utc_day_bounds(value: datetime | date_type) -> tuple[datetime, datetime]:
    """
    First and last instant (millisecond precision) of the UTC day containing value.
    """
    start = normalize_booking_date(value)
    end = start.replace(hour=23, minute=59, second=59, microsecond=999000)
    return start, end


def create_schedule(*, data: ScheduleInput) -> Schedule:
    """
    Book a room for one UTC calendar day:
    - Normalizes the date to UTC midnight.
    - Re-checks availability in-transaction.
    - Relies on a unique constraint as the final guard.
    """
    booking_date = normalize_booking_date(data.date)

    try:
        with transaction.atomic():
            if Schedule.objects.filter(room_id=data.room_id, date=booking_date).exists():
                logger.warning("Rejected double booking of room #%s on %s", data.room_id, booking_date.date())
                raise RoomAlreadyBookedError(ROOM_ALREADY_BOOKED_MESSAGE)

            schedule = Schedule.objects.create(room_id=data.room_id, date=booking_date)
    except IntegrityError as exc:
        raise RoomAlreadyBookedError(ROOM_ALREADY_BOOKED_MESSAGE) from exc

    logger.info("Booked room #%s on %s (schedule id=%s)", schedule.room_id, booking_date.date(), schedule.id)
    return schedule


def list_schedules(
    *,
    room_id: int | None = None,
    on_date: datetime | date_type | None = None,
) -> list[Schedule]:
    queryset = Schedule.objects.all()
    if room_id is not None:
        queryset = queryset.filter(room_id=room_id)
    if on_date is not None:
        start, end = utc_day_bounds(on_date)
        queryset = queryset.filter(date__gte=start, date__lte=end)
    return list(queryset)


def get_schedule(*, schedule_id: int) -> Schedule:
    return Schedule.objects.get(id=schedule_id)


def update_schedule(*, schedule_id: int, data: ScheduleInput) -> Schedule:
    """
    Move an existing schedule to another room and/or day.
    The target must exist; the new (room, day) pair must not be held by
    any other schedule.
    """
    booking_date = normalize_booking_date(data.date)

    try:
        with transaction.atomic():
            schedule = Schedule.objects.select_for_update().get(id=schedule_id)

            conflict = (
                Schedule.objects.filter(room_id=data.room_id, date=booking_date)
                .exclude(pk=schedule.pk)
                .exists()
            )
            if conflict:
                logger.warning(
                    "Rejected moving schedule %s onto booked room #%s on %s",
                    schedule.id,
                    data.room_id,
                    booking_date.date(),
                )
                raise RoomAlreadyBookedError(ROOM_ALREADY_BOOKED_MESSAGE)

            schedule.room_id = data.room_id
            schedule.date = booking_date
            schedule.save(update_fields=["room", "date", "updated_at"])
    except IntegrityError as exc:
        raise RoomAlreadyBookedError(ROOM_ALREADY_BOOKED_MESSAGE) from exc

    logger.info("Updated schedule %s: room #%s on %s", schedule.id, schedule.room_id, booking_date.date())
    return schedule


def delete_schedule(*, schedule_id: int) -> None:
    with transaction.atomic():
        schedule = Schedule.objects.select_for_update().get(id=schedule_id)
        schedule.delete()
    logger.info("Deleted schedule %s", schedule_id)
