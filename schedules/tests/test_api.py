"""Integration tests for the schedule JSON endpoints."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from django.test import TestCase
from django.urls import reverse

from rooms.models import Room, RoomType
from schedules.models import Schedule


class ScheduleAPITests(TestCase):
    def setUp(self) -> None:
        self.room = Room.objects.create(room_number=101, room_type=RoomType.SINGLE)
        self.other = Room.objects.create(room_number=102, room_type=RoomType.DOUBLE)
        self.list_url = reverse("schedules:schedules_api")

    def _detail_url(self, schedule_id) -> str:
        return reverse("schedules:schedule_detail_api", args=[schedule_id])

    def _post(self, payload: dict):
        return self.client.post(self.list_url, data=json.dumps(payload), content_type="application/json")

    def _put(self, schedule_id, payload: dict):
        return self.client.put(
            self._detail_url(schedule_id), data=json.dumps(payload), content_type="application/json"
        )

    def test_create_schedule_normalizes_date(self) -> None:
        response = self._post({"roomId": self.room.id, "date": "2025-01-10T15:45:00.000Z"})

        self.assertEqual(response.status_code, 201, response.content)
        body = response.json()
        self.assertIn("id", body)
        self.assertEqual(body["roomId"], self.room.id)
        self.assertEqual(body["date"], "2025-01-10T00:00:00.000Z")

    def test_create_accepts_plain_date_and_offsets(self) -> None:
        plain = self._post({"roomId": self.room.id, "date": "2025-01-10"})
        offset = self._post({"roomId": self.other.id, "date": "2025-01-10T01:00:00+03:00"})

        self.assertEqual(plain.json()["date"], "2025-01-10T00:00:00.000Z")
        self.assertEqual(offset.json()["date"], "2025-01-09T00:00:00.000Z")

    def test_create_duplicate_schedule(self) -> None:
        self._post({"roomId": self.room.id, "date": "2025-01-10T08:00:00Z"})

        response = self._post({"roomId": self.room.id, "date": "2025-01-10T20:00:00Z"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"], "Room is already booked for this date.")

    def test_create_rejects_invalid_payloads(self) -> None:
        invalid_payloads = [
            {"roomId": "invalid-id", "date": "2025-01-10"},
            {"roomId": True, "date": "2025-01-10"},
            {"roomId": self.room.id, "date": "not-a-date"},
            {"roomId": self.room.id, "date": "2025-13-45"},
            {"roomId": self.room.id, "date": 20250110},
            {"roomId": self.room.id, "date": "2025-01-10", "guests": 2},
            {"date": "2025-01-10"},
            {"roomId": self.room.id},
        ]
        for payload in invalid_payloads:
            with self.subTest(payload=payload):
                response = self._post(payload)
                self.assertEqual(response.status_code, 400, response.content)
        self.assertFalse(Schedule.objects.exists())

    def test_list_and_filter(self) -> None:
        self.assertEqual(self.client.get(self.list_url).json(), [])

        self._post({"roomId": self.room.id, "date": "2025-03-01"})
        self._post({"roomId": self.other.id, "date": "2025-03-01"})
        self._post({"roomId": self.room.id, "date": "2025-03-02"})

        everything = self.client.get(self.list_url).json()
        by_room = self.client.get(self.list_url, {"roomId": self.room.id}).json()
        by_date = self.client.get(self.list_url, {"date": "2025-03-02"}).json()
        by_both = self.client.get(self.list_url, {"roomId": self.other.id, "date": "2025-03-01"}).json()

        self.assertEqual(len(everything), 3)
        self.assertTrue(all(item["roomId"] == self.room.id for item in by_room))
        self.assertEqual(len(by_room), 2)
        self.assertEqual([item["date"] for item in by_date], ["2025-03-02T00:00:00.000Z"])
        self.assertEqual([item["roomId"] for item in by_both], [self.other.id])

    def test_list_rejects_bad_filters(self) -> None:
        for params in ({"page": 1}, {"roomId": "abc"}, {"date": "yesterday"}):
            with self.subTest(params=params):
                response = self.client.get(self.list_url, params)
                self.assertEqual(response.status_code, 400)

    def test_get_schedule(self) -> None:
        schedule = Schedule.objects.create(room=self.room, date=datetime(2025, 3, 1, tzinfo=timezone.utc))

        response = self.client.get(self._detail_url(schedule.id))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"id": schedule.id, "roomId": self.room.id, "date": "2025-03-01T00:00:00.000Z"},
        )

    def test_get_missing_schedule(self) -> None:
        response = self.client.get(self._detail_url(999))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "Schedule not found.")

    def test_update_schedule(self) -> None:
        schedule = self._post({"roomId": self.room.id, "date": "2025-03-01"}).json()

        response = self._put(schedule["id"], {"roomId": self.other.id, "date": "2025-03-04T12:00:00Z"})

        self.assertEqual(response.status_code, 200, response.content)
        self.assertEqual(response.json()["roomId"], self.other.id)
        self.assertEqual(response.json()["date"], "2025-03-04T00:00:00.000Z")

    def test_update_onto_booked_day(self) -> None:
        schedule = self._post({"roomId": self.room.id, "date": "2025-03-01"}).json()
        self._post({"roomId": self.other.id, "date": "2025-03-04"})

        response = self._put(schedule["id"], {"roomId": self.other.id, "date": "2025-03-04T18:00:00Z"})

        self.assertEqual(response.status_code, 409)

    def test_update_missing_schedule(self) -> None:
        response = self._put(999, {"roomId": self.room.id, "date": "2025-03-01"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "Schedule not found.")

    def test_delete_schedule(self) -> None:
        schedule = self._post({"roomId": self.room.id, "date": "2025-03-01"}).json()

        self.assertEqual(self.client.delete(self._detail_url(schedule["id"])).status_code, 200)
        self.assertEqual(self.client.delete(self._detail_url(schedule["id"])).status_code, 404)

    def test_non_ascii_digit_room_id_is_rejected(self) -> None:
        created = self._post({"roomId": "²", "date": "2025-03-01"})
        listed = self.client.get(self.list_url, {"roomId": "²"})

        self.assertEqual(created.status_code, 400)
        self.assertIn("roomId must be a valid id", created.json()["details"])
        self.assertEqual(listed.status_code, 400)
        self.assertFalse(Schedule.objects.exists())

    def test_room_id_beyond_key_range_is_rejected(self) -> None:
        response = self._post({"roomId": 2**63, "date": "2025-03-01"})

        self.assertEqual(response.status_code, 400)
        self.assertIn("roomId must be a valid id", response.json()["details"])

    def test_non_ascii_digit_schedule_id_is_invalid_format(self) -> None:
        response = self.client.get("/api/schedule/%C2%B2/")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid id format")

    def test_invalid_id_format(self) -> None:
        for method in ("GET", "PUT", "DELETE"):
            with self.subTest(method=method):
                response = self.client.generic(
                    method, self._detail_url("invalid-id"), data="{}", content_type="application/json"
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["error"], "Invalid id format")


class BookingScenarioTests(TestCase):
    def _post(self, url: str, payload: dict):
        return self.client.post(url, data=json.dumps(payload), content_type="application/json")

    def test_room_and_schedule_lifecycle(self) -> None:
        rooms_url = reverse("rooms:rooms_api")
        schedules_url = reverse("schedules:schedules_api")

        room = self._post(rooms_url, {"roomNumber": 101, "roomType": "single"})
        self.assertEqual(room.status_code, 201)
        self.assertFalse(room.json()["hasSeaView"])
        room_id = room.json()["id"]

        duplicate = self._post(rooms_url, {"roomNumber": 101, "roomType": "double"})
        self.assertEqual(duplicate.status_code, 409)

        booked = self._post(schedules_url, {"roomId": room_id, "date": "2025-03-01T10:00:00Z"})
        self.assertEqual(booked.status_code, 201)
        self.assertEqual(booked.json()["date"], "2025-03-01T00:00:00.000Z")

        conflict = self._post(schedules_url, {"roomId": room_id, "date": "2025-03-01T23:00:00Z"})
        self.assertEqual(conflict.status_code, 409)

        found = self.client.get(schedules_url, {"date": "2025-03-01"})
        self.assertEqual(found.status_code, 200)
        self.assertEqual(found.json(), [booked.json()])
