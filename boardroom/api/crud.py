"""Generic CRUD routes for storage-backed entity kinds.

One ``Resource`` describes an entity kind; ``build_crud_router`` turns it
into list/get/create/update/delete endpoints so every kind follows the
same status-code contract:

- list   -> 200 with array
- get    -> 200, or 404 ``{"error": "<Kind> not found"}``
- create -> 201 (400 with field errors on invalid body)
- update -> 200 with merged record, or 404
- delete -> 204, or 404
- unexpected failures -> 500 ``{"error": "Failed to <verb> <kind>"}``
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from boardroom.api.deps import get_storage
from boardroom.api.errors import ApiError
from boardroom.api.filters import RecordFilter, no_filter
from boardroom.storage import Repository, Storage

logger = structlog.get_logger()


@dataclass(frozen=True)
class Resource:
    """An entity kind exposed over REST."""

    path: str
    attribute: str
    singular: str
    plural: str
    record_model: type[BaseModel]
    insert_model: type[BaseModel]
    update_model: type[BaseModel]
    filter_dependency: Callable[..., RecordFilter] = no_filter

    @property
    def not_found(self) -> str:
        """404 message, e.g. ``Action item not found``."""
        return f"{self.singular.capitalize()} not found"

    def repository(self, storage: Storage) -> Repository[Any]:
        """Get this kind's repository from storage."""
        return getattr(storage, self.attribute)


@contextmanager
def failure_as(message: str, **context: Any) -> Iterator[None]:
    """Turn any exception raised inside the block into a 500 ApiError."""
    try:
        yield
    except Exception as exc:
        logger.exception("request_failed", error=message, **context)
        raise ApiError(500, message) from exc


def build_crud_router(resource: Resource) -> APIRouter:
    """Build the REST routes for one entity kind.

    Args:
        resource: Descriptor of the entity kind

    Returns:
        Router mounted at ``/<resource.path>``
    """
    router = APIRouter(prefix=f"/{resource.path}", tags=[resource.path])
    record_model = resource.record_model
    insert_model = resource.insert_model
    update_model = resource.update_model
    kind = resource.attribute

    @router.get(
        "",
        response_model=list[record_model],  # type: ignore[valid-type]
        name=f"list_{kind}",
    )
    async def list_records(
        criteria: RecordFilter = Depends(resource.filter_dependency),
        storage: Storage = Depends(get_storage),
    ) -> Any:
        with failure_as(f"Failed to fetch {resource.plural}", kind=kind):
            records = await resource.repository(storage).list_all()
        return criteria.apply(records)

    @router.get("/{record_id}", response_model=record_model, name=f"get_{kind}")
    async def get_record(
        record_id: str,
        storage: Storage = Depends(get_storage),
    ) -> Any:
        with failure_as(f"Failed to fetch {resource.singular}", kind=kind):
            record = await resource.repository(storage).get(record_id)
        if record is None:
            raise ApiError(404, resource.not_found)
        return record

    @router.post(
        "",
        status_code=201,
        response_model=record_model,
        name=f"create_{kind}",
    )
    async def create_record(
        payload: insert_model,  # type: ignore[valid-type]
        storage: Storage = Depends(get_storage),
    ) -> Any:
        with failure_as(f"Failed to create {resource.singular}", kind=kind):
            record = await resource.repository(storage).create(payload)
        logger.info("record_created", kind=kind, id=record.id)
        return record

    @router.patch("/{record_id}", response_model=record_model, name=f"update_{kind}")
    async def update_record(
        record_id: str,
        payload: update_model,  # type: ignore[valid-type]
        storage: Storage = Depends(get_storage),
    ) -> Any:
        changes = payload.model_dump(exclude_unset=True)  # type: ignore[attr-defined]
        with failure_as(f"Failed to update {resource.singular}", kind=kind):
            record = await resource.repository(storage).update(record_id, changes)
        if record is None:
            raise ApiError(404, resource.not_found)
        logger.info("record_updated", kind=kind, id=record_id, fields=sorted(changes))
        return record

    @router.delete(
        "/{record_id}",
        status_code=204,
        response_class=Response,
        name=f"delete_{kind}",
    )
    async def delete_record(
        record_id: str,
        storage: Storage = Depends(get_storage),
    ) -> Response:
        with failure_as(f"Failed to delete {resource.singular}", kind=kind):
            deleted = await resource.repository(storage).delete(record_id)
        if not deleted:
            raise ApiError(404, resource.not_found)
        logger.info("record_deleted", kind=kind, id=record_id)
        return Response(status_code=204)

    return router
