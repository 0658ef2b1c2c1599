"""Optional list filtering for collection endpoints.

Mirrors the list pages of the portal: a case-insensitive substring search
over one or two display fields, combined with exact matches on selected
fields. A filter value of ``"all"`` (or no value) disables that filter.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from fastapi import Query
from pydantic import BaseModel

ALL = "all"

R = TypeVar("R", bound=BaseModel)


@dataclass(frozen=True)
class RecordFilter:
    """Search and exact-match criteria for one list request."""

    search: str | None = None
    search_fields: tuple[str, ...] = ()
    exact: dict[str, str | None] = field(default_factory=dict)
    case_insensitive: frozenset[str] = frozenset()

    def _matches_search(self, record: BaseModel) -> bool:
        if not self.search or not self.search_fields:
            return True
        needle = self.search.lower()
        return any(
            needle in (getattr(record, name) or "").lower()
            for name in self.search_fields
        )

    def _matches_exact(self, record: BaseModel) -> bool:
        for name, wanted in self.exact.items():
            if wanted is None or wanted == ALL:
                continue
            value = getattr(record, name)
            if name in self.case_insensitive:
                if value is None or value.lower() != wanted.lower():
                    return False
            elif value != wanted:
                return False
        return True

    def matches(self, record: BaseModel) -> bool:
        """Check whether a record passes every active criterion."""
        return self._matches_search(record) and self._matches_exact(record)

    def apply(self, records: Iterable[R]) -> list[R]:
        """Return the records that match, preserving their order."""
        return [record for record in records if self.matches(record)]


def no_filter() -> RecordFilter:
    """Filter that keeps every record."""
    return RecordFilter()


def meeting_filter(
    search: str | None = Query(default=None, description="Match in title"),
    status: str | None = Query(default=None, description="Exact status"),
) -> RecordFilter:
    """Meetings list: title search, status filter."""
    return RecordFilter(
        search=search,
        search_fields=("title",),
        exact={"status": status},
    )


def member_filter(
    search: str | None = Query(default=None, description="Match in name or email"),
    role: str | None = Query(default=None, description="Exact board role"),
) -> RecordFilter:
    """Members list: name/email search, role filter."""
    return RecordFilter(
        search=search,
        search_fields=("name", "email"),
        exact={"role": role},
    )


def document_filter(
    search: str | None = Query(default=None, description="Match in title"),
    category: str | None = Query(default=None, description="Category, any case"),
) -> RecordFilter:
    """Documents list: title search, case-insensitive category filter."""
    return RecordFilter(
        search=search,
        search_fields=("title",),
        exact={"category": category},
        case_insensitive=frozenset({"category"}),
    )


def action_item_filter(
    search: str | None = Query(default=None, description="Match in title"),
    status: str | None = Query(default=None, description="Exact status"),
    priority: str | None = Query(default=None, description="Exact priority"),
) -> RecordFilter:
    """Action items list: title search, status and priority filters."""
    return RecordFilter(
        search=search,
        search_fields=("title",),
        exact={"status": status, "priority": priority},
    )
