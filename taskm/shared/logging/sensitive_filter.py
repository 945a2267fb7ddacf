# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    # Session tokens: whole JWTs first, then anything after "Bearer"
    (re.compile(r"\beyJ[\w-]*\.[\w-]+\.[\w-]+"), "***JWT***"),
    (re.compile(r"(bearer\s+)(\S{8,})", re.IGNORECASE), rf"\1{_REDACTED}"),
    (re.compile(r"(authorization\s*[:=]\s*['\"]?)([^'\"\s,}]{8,})", re.IGNORECASE), rf"\1{_REDACTED}"),
    # Password hashes as produced by werkzeug
    (re.compile(r"\b(scrypt|pbkdf2):[^\s'\",}]+"), rf"\1:{_REDACTED}"),
    # key=value and "key": "value" forms
    (
        re.compile(r"""(["']?(?:password(?:_hash)?|secret_key|token)["']?\s*[:=]\s*['"]?)([^'"\s,}]+)""", re.IGNORECASE),
        rf"\1{_REDACTED}",
    ),
    # Credentials inside database URLs
    (re.compile(r"(\w+(?:\+\w+)?://[^:/\s]+:)([^@\s]+)(@)"), rf"\1{_REDACTED}\3"),
    # Email local parts
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: rewrite the message in place, never drop the record."""

    record["message"] = sanitize_message(record["message"])
    return True
