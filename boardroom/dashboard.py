"""Portal dashboard aggregation.

Summarises the board's current state: headline counts plus short lists of
what is coming up next.
"""

from datetime import UTC, datetime

from pydantic import Field

from boardroom.models import ActionItem, Document, Meeting, Schema
from boardroom.storage import Storage

UPCOMING_MEETINGS_LIMIT = 3
PENDING_ACTIONS_LIMIT = 5
RECENT_DOCUMENTS_LIMIT = 4


class DashboardStats(Schema):
    """Headline counts shown on the dashboard."""

    upcoming_meetings: int = Field(description="Meetings with status 'scheduled'")
    pending_actions: int = Field(description="Action items with status 'pending'")
    active_members: int = Field(description="Members with status 'active'")
    total_documents: int = Field(description="All catalogued documents")


class DashboardSummary(Schema):
    """Everything the dashboard page displays."""

    stats: DashboardStats
    upcoming_meetings: list[Meeting] = Field(default_factory=list)
    pending_actions: list[ActionItem] = Field(default_factory=list)
    recent_documents: list[Document] = Field(default_factory=list)


def date_sort_key(value: str | None) -> tuple[int, datetime]:
    """Sort key for ISO date strings; unparseable values sort last."""
    if value:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            pass
        else:
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(UTC).replace(tzinfo=None)
            return (0, parsed)
    return (1, datetime.min)


async def build_dashboard(storage: Storage) -> DashboardSummary:
    """Compute the dashboard summary from storage.

    Args:
        storage: Storage to read from

    Returns:
        DashboardSummary with counts and the upcoming/pending/recent lists
    """
    meetings = await storage.meetings.list_all()
    action_items = await storage.action_items.list_all()
    members = await storage.members.list_all()
    documents = await storage.documents.list_all()

    upcoming = sorted(
        (m for m in meetings if m.status != "completed"),
        key=lambda m: date_sort_key(m.date),
    )
    pending = sorted(
        (a for a in action_items if a.status == "pending"),
        key=lambda a: date_sort_key(a.due_date),
    )

    return DashboardSummary(
        stats=DashboardStats(
            upcoming_meetings=sum(1 for m in meetings if m.status == "scheduled"),
            pending_actions=len(pending),
            active_members=sum(1 for m in members if m.status == "active"),
            total_documents=len(documents),
        ),
        upcoming_meetings=upcoming[:UPCOMING_MEETINGS_LIMIT],
        pending_actions=pending[:PENDING_ACTIONS_LIMIT],
        recent_documents=documents[:RECENT_DOCUMENTS_LIMIT],
    )
