"""
Data store adapter: the four row primitives every resource endpoint needs.

Rows go in as column -> value mappings and come back as the resource's
record schema. Search is not done here; only equality filters.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Protocol, TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from planner.core.exceptions import RecordNotFoundError, StoreError
from planner.core.schemas import RecordBase

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RecordBase)

# Equality filters the adapter knows how to push down to the store.
FILTER_COLUMNS = ("status", "category", "type")


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


class RowStore(Protocol):
    def list_rows(self, model: type[R], filters: Mapping[str, str | None] | None = None) -> list[R]: ...

    def insert_row(self, model: type[R], row: Mapping[str, Any]) -> R: ...

    def update_row_by_id(self, model: type[R], record_id: str, updates: Mapping[str, Any]) -> R: ...

    def soft_delete_row(self, model: type[R], record_id: str) -> None: ...


class SupabaseRowStore:
    """RowStore backed by a Supabase (PostgREST) table per resource."""

    def __init__(self, client_factory: Callable[[], Client]):
        self._client_factory = client_factory
        self._client: Client | None = None

    @property
    def client(self) -> Client:
        # Created on first use so a misconfigured store only fails requests that reach it.
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def list_rows(self, model: type[R], filters: Mapping[str, str | None] | None = None) -> list[R]:
        """All non-deleted rows matching every non-empty equality filter."""
        query = self.client.table(model.table).select("*").eq("deleted", False)
        for column, value in (filters or {}).items():
            if column not in FILTER_COLUMNS:
                raise ValueError(f"Unsupported filter column: {column}")
            if value:
                query = query.eq(column, value)

        result = self._execute(query, model.table, "list")
        return [model.from_row(row) for row in result.data or []]

    def insert_row(self, model: type[R], row: Mapping[str, Any]) -> R:
        result = self._execute(
            self.client.table(model.table).insert(dict(row)),
            model.table,
            "insert",
        )
        if not result.data:
            raise StoreError(f"Insert into '{model.table}' returned no row")
        return model.from_row(result.data[0])

    def update_row_by_id(self, model: type[R], record_id: str, updates: Mapping[str, Any]) -> R:
        """Update exactly the row with `record_id`.

        Raises:
            RecordNotFoundError: If no row has that id.
        """
        result = self._execute(
            self.client.table(model.table).update(dict(updates)).eq("id", record_id),
            model.table,
            "update",
        )
        if not result.data:
            raise RecordNotFoundError(model.table, record_id)
        return model.from_row(result.data[0])

    def soft_delete_row(self, model: type[R], record_id: str) -> None:
        """Flag the row as deleted. A missing id is a silent no-op."""
        self._execute(
            self.client.table(model.table)
            .update({"deleted": True, "updated_at": utc_now_iso()})
            .eq("id", record_id),
            model.table,
            "soft delete",
        )

    def _execute(self, query, table: str, operation: str):
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Store {operation} on '{table}' failed: {e}", exc_info=True)
            raise StoreError(f"Store {operation} on '{table}' failed") from e
