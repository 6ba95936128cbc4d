from django.db import models


# PositiveIntegerField is a 32-bit column on PostgreSQL.
MAX_ROOM_NUMBER = 2_147_483_647


class RoomType(models.TextChoices):
    SINGLE = "single", "Single"
    DOUBLE = "double", "Double"
    SUITE = "suite", "Suite"


class Room(models.Model):
    room_number = models.PositiveIntegerField(unique=True)
    room_type = models.CharField(max_length=16, choices=RoomType.choices)
    has_sea_view = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"Room {self.room_number} · {self.get_room_type_display()}"
