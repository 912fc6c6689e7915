"""
Shared fixtures: an in-memory store double and API clients with/without the admin token.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping

import pytest
from fastapi.testclient import TestClient

from planner.config import get_settings
from planner.core.dependencies import get_row_store
from planner.core.exceptions import RecordNotFoundError
from planner.core.store import utc_now_iso

ADMIN_TOKEN = "test-admin-token-0123456789"


class InMemoryRowStore:
    """Test-only RowStore double that matches SupabaseRowStore behavior."""

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []

    def list_rows(self, model, filters: Mapping[str, str | None] | None = None):
        self.calls.append(("list", model.table))
        rows = [
            row for row in self.tables.get(model.table, {}).values()
            if row.get("deleted") is False
            and all(row.get(column) == value for column, value in (filters or {}).items() if value)
        ]
        return [model.from_row(copy.deepcopy(row)) for row in rows]

    def insert_row(self, model, row: Mapping[str, Any]):
        self.calls.append(("insert", model.table))
        stored = dict(row)
        self.tables.setdefault(model.table, {})[stored["id"]] = stored
        return model.from_row(copy.deepcopy(stored))

    def update_row_by_id(self, model, record_id: str, updates: Mapping[str, Any]):
        self.calls.append(("update", model.table))
        current = self.tables.get(model.table, {}).get(record_id)
        if current is None:
            raise RecordNotFoundError(model.table, record_id)
        current.update(updates)
        return model.from_row(copy.deepcopy(current))

    def soft_delete_row(self, model, record_id: str) -> None:
        self.calls.append(("soft_delete", model.table))
        current = self.tables.get(model.table, {}).get(record_id)
        if current is not None:
            current.update({"deleted": True, "updated_at": utc_now_iso()})

    def raw_row(self, table: str, record_id: str) -> dict[str, Any]:
        return self.tables[table][record_id]


@pytest.fixture
def store() -> InMemoryRowStore:
    return InMemoryRowStore()


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch, store: InMemoryRowStore):
    monkeypatch.setenv("ADMIN_TOKEN", ADMIN_TOKEN)
    monkeypatch.setenv("SUPABASE_URL", "")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "")
    get_settings.cache_clear()

    from planner.main import create_app

    application = create_app()
    application.dependency_overrides[get_row_store] = lambda: store
    yield application
    get_settings.cache_clear()


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app, raise_server_exceptions=False) as test_client:
        test_client.headers.update({"x-admin-token": ADMIN_TOKEN})
        yield test_client


@pytest.fixture
def anon_client(app) -> TestClient:
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
