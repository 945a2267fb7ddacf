# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Turn pydantic request-body errors into a 400 ``ValidationError``."""

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _field_name(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors = [
        {"field": _field_name(error["loc"]), "type": error["type"]}
        for error in exc.errors(include_url=False, include_input=False)
    ]
    return {
        "fields": sorted({error["field"] for error in errors}),
        "errors": errors,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    """Re-raise with the offending fields named; input values are never echoed."""

    context = format_pydantic_errors(exc)
    raise ValidationError(
        f"Invalid value for: {', '.join(context['fields'])}", context=context
    ) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
