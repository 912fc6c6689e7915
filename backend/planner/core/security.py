"""
Security utilities: shared admin token check.

There is a single static secret (ADMIN_TOKEN). No users, no roles.
"""

import hmac


def _as_bytes(value: str | bytes) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def safe_compare(supplied: str | bytes, expected: str | bytes) -> bool:
    """Constant-time comparison. Strings are compared as their UTF-8 bytes.

    On a length mismatch a same-cost comparison is still performed, so the
    caller cannot tell a wrong length from wrong content by timing.
    """
    supplied_bytes = _as_bytes(supplied)
    expected_bytes = _as_bytes(expected)
    if len(supplied_bytes) != len(expected_bytes):
        hmac.compare_digest(supplied_bytes, supplied_bytes)
        return False
    return hmac.compare_digest(supplied_bytes, expected_bytes)


def header_bytes(value: str | None) -> bytes | None:
    """Raw bytes of a header value as sent on the wire.

    The ASGI server decodes header values as latin-1; encoding back gives the
    original bytes, so a UTF-8 token sent by the client compares correctly.
    """
    if value is None:
        return None
    return value.encode("latin-1")


def verify_admin_token(supplied: str | bytes | None, expected: str | None) -> bool:
    """True only when a server secret is configured and `supplied` equals it."""
    if not expected:
        return False
    return safe_compare(supplied or b"", expected)
