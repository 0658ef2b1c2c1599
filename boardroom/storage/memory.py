"""In-memory storage backend.

State lives in plain dicts for the lifetime of the process. Nothing is
persisted and nothing is locked: concurrent writers to the same record
simply overwrite each other.
"""

from collections.abc import Mapping
from typing import Any
from uuid import uuid4

import structlog
from pydantic import BaseModel

from boardroom.models import (
    ActionItem,
    AgendaItem,
    BoardMember,
    Document,
    Meeting,
    User,
)
from boardroom.storage.base import E, Repository, Storage

logger = structlog.get_logger()


def generate_id() -> str:
    """Return a new opaque record identifier."""
    return uuid4().hex


class MemoryRepository(Repository[E]):
    """Dict-backed repository for a single entity kind."""

    def __init__(self, kind: str, record_type: type[E]):
        """Initialize an empty repository.

        Args:
            kind: Entity kind name used in log events
            record_type: Model class of the stored records
        """
        self.kind = kind
        self.record_type = record_type
        self._records: dict[str, E] = {}

    def _next_id(self) -> str:
        record_id = generate_id()
        while record_id in self._records:
            record_id = generate_id()
        return record_id

    async def list_all(self) -> list[E]:
        return list(self._records.values())

    async def get(self, record_id: str) -> E | None:
        return self._records.get(record_id)

    async def create(self, data: BaseModel) -> E:
        record_id = self._next_id()
        record = self.record_type.model_validate({**data.model_dump(), "id": record_id})
        self._records[record_id] = record
        logger.debug("record_created", kind=self.kind, id=record_id)
        return record

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> E | None:
        existing = self._records.get(record_id)
        if existing is None:
            return None

        fields = self.record_type.model_fields
        merged = {k: v for k, v in changes.items() if k in fields and k != "id"}
        updated = existing.model_copy(update=merged)
        self._records[record_id] = updated
        logger.debug(
            "record_updated", kind=self.kind, id=record_id, fields=sorted(merged)
        )
        return updated

    async def delete(self, record_id: str) -> bool:
        removed = self._records.pop(record_id, None) is not None
        if removed:
            logger.debug("record_deleted", kind=self.kind, id=record_id)
        return removed

    async def count(self) -> int:
        return len(self._records)


class MemoryStorage(Storage):
    """Process-lifetime storage for every entity kind.

    Deletes never cascade: removing a meeting leaves its agenda items,
    documents and action items pointing at an id that no longer exists.
    """

    def __init__(self) -> None:
        self.users: MemoryRepository[User] = MemoryRepository("user", User)
        self.members: MemoryRepository[BoardMember] = MemoryRepository(
            "member", BoardMember
        )
        self.meetings: MemoryRepository[Meeting] = MemoryRepository("meeting", Meeting)
        self.agenda_items: MemoryRepository[AgendaItem] = MemoryRepository(
            "agenda_item", AgendaItem
        )
        self.documents: MemoryRepository[Document] = MemoryRepository(
            "document", Document
        )
        self.action_items: MemoryRepository[ActionItem] = MemoryRepository(
            "action_item", ActionItem
        )

    async def list_agenda_items_for_meeting(self, meeting_id: str) -> list[AgendaItem]:
        items = [
            item
            for item in await self.agenda_items.list_all()
            if item.meeting_id == meeting_id
        ]
        # sorted() is stable, so equal positions keep insertion order
        return sorted(items, key=lambda item: (item.order is None, item.order or 0))

    async def find_user_by_username(self, username: str) -> User | None:
        for user in await self.users.list_all():
            if user.username == username:
                return user
        return None
