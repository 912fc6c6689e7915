"""
Generic resource endpoint: list / create / update / soft delete over one table.

Each feature subclasses `ResourceService` with its schemas, its declared
list filters and, where needed, its creation defaults; then mounts the
router built by `build_resource_router`.
"""

import logging
import uuid
from typing import Any, ClassVar

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError

from planner.config import Settings, get_settings
from planner.core.access import (
    is_valid_uuid,
    json_response,
    parse_body,
    preflight_response,
    stringify,
)
from planner.core.dependencies import get_row_store, read_body, require_admin_token
from planner.core.exceptions import BadRequestError, MethodNotAllowedError
from planner.core.schemas import RecordBase, WriteBase
from planner.core.store import RowStore, utc_now_iso

logger = logging.getLogger(__name__)


def matches_search(record: RecordBase, query: str) -> bool:
    """Case-insensitive substring match against every field of the record.

    Values are rendered with the same text coercion as client input, so a
    stored price of 1200.0 reads "1200" and booleans read "true"/"false".
    Empty, zero and false values never match.
    """
    needle = query.lower()
    return any(
        value and needle in stringify(value).lower()
        for value in record.model_dump().values()
    )


class ResourceService:
    """CRUD over one resource table with soft delete."""

    record_model: ClassVar[type[RecordBase]]
    write_model: ClassVar[type[WriteBase]]
    filters: ClassVar[tuple[str, ...]] = ()

    def __init__(self, store: RowStore):
        self.store = store

    def list_records(self, search: str | None = None, **filters: str | None) -> list[dict[str, Any]]:
        """Non-deleted records, narrowed by equality filters then by `search`."""
        declared = {name: filters.get(name) for name in self.filters}
        records = self.store.list_rows(self.record_model, declared)
        if search:
            records = [r for r in records if matches_search(r, search)]
        return [r.to_wire() for r in records]

    def create_record(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Insert a new record. id, timestamps and deleted are always server-assigned."""
        columns = self._validate(payload).to_columns()
        columns = self.apply_create_defaults(columns)

        now = utc_now_iso()
        row = {
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
            "deleted": False,
            **columns,
        }
        created = self.store.insert_row(self.record_model, row)
        logger.info(f"Created {self.record_model.table} {created.id}")
        return created.to_wire()

    def update_record(self, record_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Apply only the allow-listed fields present in `payload`; always refresh updated_at."""
        updates = self._validate(payload).to_columns(partial=True)
        updates["updated_at"] = utc_now_iso()
        updated = self.store.update_row_by_id(self.record_model, record_id, updates)
        return updated.to_wire()

    def delete_record(self, record_id: str) -> None:
        self.store.soft_delete_row(self.record_model, record_id)

    def apply_create_defaults(self, columns: dict[str, Any]) -> dict[str, Any]:
        """Hook for resource-specific defaults at creation."""
        return columns

    def _validate(self, payload: dict[str, Any]) -> WriteBase:
        try:
            return self.write_model.model_validate(payload)
        except ValidationError as e:
            raise BadRequestError("Invalid JSON body", detail=str(e)) from e


def _require_id(record_id: str | None) -> str:
    if not record_id:
        raise BadRequestError("Missing id query parameter")
    if not is_valid_uuid(record_id):
        raise BadRequestError("Invalid id format")
    return record_id


def _require_payload(raw: bytes | None, settings: Settings) -> dict[str, Any]:
    payload = parse_body(raw, settings.MAX_BODY_BYTES)
    if payload is None:
        raise BadRequestError("Invalid JSON body")
    return payload


# Verbs that pass the token gate and are then refused with 405.
UNSUPPORTED_METHODS = ["PATCH", "HEAD", "TRACE", "CONNECT"]


def build_resource_router(service_class: type[ResourceService]) -> APIRouter:
    """Router exposing OPTIONS/GET/POST/PUT/DELETE for one resource.

    Every route answers both with and without the trailing slash, so the
    resource path never redirects (a redirected preflight fails in browsers).
    The target record of PUT and DELETE is the `id` query parameter.
    """
    router = APIRouter()
    authenticated = [Depends(require_admin_token)]

    def get_service(store: RowStore = Depends(get_row_store)) -> ResourceService:
        return service_class(store)

    async def preflight():
        return preflight_response()

    def list_records(
        request: Request,
        search: str | None = None,
        service: ResourceService = Depends(get_service),
    ):
        filters = {name: request.query_params.get(name) for name in service_class.filters}
        return json_response(200, service.list_records(search=search, **filters))

    def create_record(
        raw: bytes | None = Depends(read_body),
        settings: Settings = Depends(get_settings),
        service: ResourceService = Depends(get_service),
    ):
        payload = _require_payload(raw, settings)
        return json_response(201, service.create_record(payload))

    def update_record(
        record_id: str | None = Query(default=None, alias="id"),
        raw: bytes | None = Depends(read_body),
        settings: Settings = Depends(get_settings),
        service: ResourceService = Depends(get_service),
    ):
        record_id = _require_id(record_id)
        payload = _require_payload(raw, settings)
        return json_response(200, service.update_record(record_id, payload))

    def delete_record(
        record_id: str | None = Query(default=None, alias="id"),
        service: ResourceService = Depends(get_service),
    ):
        service.delete_record(_require_id(record_id))
        return json_response(200, {"status": "deleted"})

    async def method_not_allowed():
        raise MethodNotAllowedError()

    for path in ("/", ""):
        in_schema = path == "/"
        router.add_api_route(path, preflight, methods=["OPTIONS"], include_in_schema=False)
        router.add_api_route(
            path, list_records, methods=["GET"],
            dependencies=authenticated, include_in_schema=in_schema,
        )
        router.add_api_route(
            path, create_record, methods=["POST"],
            dependencies=authenticated, include_in_schema=in_schema,
        )
        router.add_api_route(
            path, update_record, methods=["PUT"],
            dependencies=authenticated, include_in_schema=in_schema,
        )
        router.add_api_route(
            path, delete_record, methods=["DELETE"],
            dependencies=authenticated, include_in_schema=in_schema,
        )
        router.add_api_route(
            path, method_not_allowed, methods=UNSUPPORTED_METHODS,
            dependencies=authenticated, include_in_schema=False,
        )

    return router
