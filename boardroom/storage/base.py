"""Storage contract for the board portal.

Routes depend only on these abstractions, so the in-memory backend can be
replaced by a durable one without touching the HTTP layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from boardroom.models import (
    ActionItem,
    AgendaItem,
    BoardMember,
    Document,
    InsertUser,
    Meeting,
    User,
)
from boardroom.storage.errors import UsernameTakenError

E = TypeVar("E", bound=BaseModel)


class Repository(ABC, Generic[E]):
    """Keyed CRUD store for one entity kind."""

    @abstractmethod
    async def list_all(self) -> list[E]:
        """Return every record held. Order is not part of the contract."""

    @abstractmethod
    async def get(self, record_id: str) -> E | None:
        """Return the record with this id, or None if there is none."""

    @abstractmethod
    async def create(self, data: BaseModel) -> E:
        """Store a new record built from an insert model.

        Args:
            data: Insert model for this kind, defaults already applied

        Returns:
            The stored record including its freshly generated id
        """

    @abstractmethod
    async def update(self, record_id: str, changes: Mapping[str, Any]) -> E | None:
        """Shallow-merge changes over an existing record.

        Fields missing from ``changes`` keep their value; fields present
        overwrite it, including explicit None. The id never changes.

        Args:
            record_id: Record to update
            changes: Field name -> new value

        Returns:
            The updated record, or None if no record has this id
        """

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Remove a record. Returns whether anything was removed."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of records held."""


class Storage(ABC):
    """All repositories of the portal plus cross-kind queries."""

    users: Repository[User]
    members: Repository[BoardMember]
    meetings: Repository[Meeting]
    agenda_items: Repository[AgendaItem]
    documents: Repository[Document]
    action_items: Repository[ActionItem]

    @abstractmethod
    async def list_agenda_items_for_meeting(self, meeting_id: str) -> list[AgendaItem]:
        """Return agenda items whose meeting_id equals the argument.

        The meeting itself is not looked up; an unknown id gives an empty list.
        """

    @abstractmethod
    async def find_user_by_username(self, username: str) -> User | None:
        """Return the first user with exactly this username."""

    async def create_user(self, data: InsertUser) -> User:
        """Register a user, refusing duplicate usernames.

        Raises:
            UsernameTakenError: If the username is already registered
        """
        if await self.find_user_by_username(data.username) is not None:
            raise UsernameTakenError(data.username)
        return await self.users.create(data)
