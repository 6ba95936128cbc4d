from datetime import date as date_type
from datetime import datetime, time
from datetime import timezone as dt_timezone

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone


def normalize_booking_date(value: datetime | date_type) -> datetime:
    """
    Truncate a date or datetime to 00:00:00.000 UTC of its UTC calendar day.
    Naive datetimes are taken to be UTC already.
    """
    if isinstance(value, datetime):
        if timezone.is_naive(value):
            value = value.replace(tzinfo=dt_timezone.utc)
        return value.astimezone(dt_timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time.min, tzinfo=dt_timezone.utc)


class Schedule(models.Model):
    # Logical reference only: no database constraint, rooms may be deleted independently.
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="schedules",
    )
    date = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["room", "date"],
                name="unique_schedule_room_date",
            )
        ]
        indexes = [
            models.Index(fields=["date"], name="idx_schedule_date"),
        ]
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"Room #{self.room_id} · {self.date:%Y-%m-%d}"

    def clean(self) -> None:
        """
        Normalize the date and prevent double booking at the model validation
        layer so admin and any other save path get the same protection before
        the DB constraint fires.
        """
        super().clean()
        if self.date is not None:
            self.date = normalize_booking_date(self.date)
        if self.room_id is not None and self.date is not None:
            conflict = (
                Schedule.objects.filter(room_id=self.room_id, date=self.date)
                .exclude(pk=self.pk)
                .exists()
            )
            if conflict:
                raise ValidationError({"date": "This room is already booked for that date."})
