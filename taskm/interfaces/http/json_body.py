from __future__ import annotations

from typing import Any

from flask import Request

from taskm.shared.errors import ValidationError


def json_object(req: Request) -> dict[str, Any]:
    """Request body as a dict; a missing or unparsable body counts as empty."""

    payload = req.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object", code="body_not_object")
    return payload
