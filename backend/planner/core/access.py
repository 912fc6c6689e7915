"""
Shared access contract: request and response shaping used by every resource endpoint.

- body parsing with a hard size limit
- canonical UUID check for `?id=`
- JSON responses with CORS / no-sniff headers and 5xx sanitization
- the two field coercions (text, numeric) applied to client input
"""

import json
import math
import re
from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

MAX_BODY_BYTES = 512 * 1024  # 512 KiB

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, x-admin-token",
    "Access-Control-Max-Age": "86400",
}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
}

INTERNAL_ERROR_MESSAGE = "Internal server error"

_NUMERIC_JUNK = re.compile(r"[^0-9.\-]")


# ── Request shaping ──────────────────────────────────────

def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_body(raw: bytes | str | None, max_bytes: int = MAX_BODY_BYTES) -> dict | None:
    """Parse a JSON object body.

    Returns None when the body is empty, larger than `max_bytes`, not valid
    JSON, or valid JSON that is not an object. Oversized bodies are rejected
    before any decoding happens.
    """
    if not raw:
        return None
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    if len(raw) > max_bytes:
        return None
    try:
        payload = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def is_valid_uuid(value: str | None) -> bool:
    """True if `value` is a canonical 8-4-4-4-12 UUID (versions 1-5, RFC variant)."""
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


# ── Response shaping ─────────────────────────────────────

def json_response(status_code: int, data: Any, sanitize_error: bool = False) -> JSONResponse:
    """Build a JSON response carrying the shared headers.

    With `sanitize_error`, a 5xx body holding an `error` key is replaced by
    the generic internal error message.
    """
    if (
        sanitize_error
        and status_code >= 500
        and isinstance(data, dict)
        and "error" in data
    ):
        data = {"error": INTERNAL_ERROR_MESSAGE}

    return JSONResponse(
        status_code=status_code,
        content=data,
        headers={**SECURITY_HEADERS, **CORS_HEADERS},
    )


def preflight_response() -> Response:
    """Empty 204 answer to a CORS preflight."""
    return Response(status_code=204, headers=dict(CORS_HEADERS))


# ── Field coercion ───────────────────────────────────────

def stringify(value: Any) -> str | None:
    """Text coercion for client-supplied fields. None stays None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def to_numeric_or_null(value: Any) -> float | None:
    """Numeric coercion for money fields: "1,200.50" -> 1200.5, "abc" -> None."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None

    cleaned = _NUMERIC_JUNK.sub("", stringify(value))
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
