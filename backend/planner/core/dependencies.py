"""
FastAPI dependency injection functions.
"""

import logging
from functools import lru_cache

from fastapi import Depends, Header, Request

from planner.config import Settings, get_settings
from planner.core.database import get_supabase_client
from planner.core.exceptions import UnauthorizedError
from planner.core.security import header_bytes, verify_admin_token
from planner.core.store import RowStore, SupabaseRowStore

logger = logging.getLogger(__name__)


@lru_cache
def get_row_store() -> RowStore:
    """Dependency: the process-wide store adapter (built once, client created lazily)."""
    return SupabaseRowStore(get_supabase_client)


def require_admin_token(
    request: Request,
    x_admin_token: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency: reject the request unless x-admin-token matches ADMIN_TOKEN.

    Raises:
        UnauthorizedError: On a missing or wrong token, or no configured secret.
    """
    if not verify_admin_token(header_bytes(x_admin_token), settings.ADMIN_TOKEN):
        if not settings.ADMIN_TOKEN:
            logger.warning("ADMIN_TOKEN is not configured, rejecting request")
        else:
            logger.warning(f"Rejected {request.method} {request.url.path}: bad admin token")
        raise UnauthorizedError()


async def read_body(request: Request, settings: Settings = Depends(get_settings)) -> bytes | None:
    """Dependency: raw request body, or None once it exceeds MAX_BODY_BYTES.

    Reading stops at the first chunk past the limit.
    """
    limit = settings.MAX_BODY_BYTES
    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            return None
        chunks.append(chunk)
    return b"".join(chunks)
