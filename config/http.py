from __future__ import annotations

import json
from typing import Any

from django.http import JsonResponse


INVALID_ID_MESSAGE = "Invalid id format"
INVALID_NUMBER_MESSAGE = "Validation failed (numeric string is expected)"

# Upper bound of a BigAutoField primary key.
MAX_ID = 2**63 - 1


class InvalidPayload(Exception):
    """Raised when a request body cannot be decoded into a JSON object."""


def parse_id(value: Any) -> int | None:
    """
    Parse an entity identity from a path segment, query value or JSON number.
    Returns None when the value is not a positive integer identity.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        value = int(value)
    if isinstance(value, int) and 0 < value <= MAX_ID:
        return value
    return None


def parse_int(value: str) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_json_object(request) -> dict[str, Any]:
    try:
        payload = json.loads(request.body.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidPayload("Invalid JSON payload.") from exc
    if not isinstance(payload, dict):
        raise InvalidPayload("JSON payload must be an object.")
    return payload


def unknown_properties(keys, allowed) -> list[str]:
    return [f"property {key} should not exist" for key in sorted(set(keys) - set(allowed))]


def error_response(message: str, *, status: int, details: list[str] | None = None) -> JsonResponse:
    body: dict[str, Any] = {"error": message}
    if details:
        body["details"] = details
    return JsonResponse(body, status=status)


def validation_error(details: list[str]) -> JsonResponse:
    return error_response("Validation error.", status=400, details=details)
