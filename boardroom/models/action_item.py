"""ActionItem model for follow-ups agreed by the board."""

from pydantic import Field

from boardroom.models.base import Entity, Schema


class InsertActionItem(Schema):
    """Fields accepted when recording an action item."""

    title: str = Field(description="What needs to be done")
    description: str | None = Field(default=None, description="Details")
    assignee_id: str | None = Field(
        default=None,
        description="Board member responsible",
    )
    due_date: str = Field(description="When it is due (ISO format)")
    priority: str = Field(default="medium", description="low, medium or high")
    status: str = Field(default="pending", description="Progress status")
    meeting_id: str | None = Field(
        default=None,
        description="Meeting the item was raised in",
    )


class ActionItem(InsertActionItem, Entity):
    """A tracked action item.

    ``assignee_id`` and ``meeting_id`` are plain identifiers; they are not
    checked against the member or meeting collections.
    """


class ActionItemUpdate(Schema):
    """Partial update for an action item."""

    title: str | None = None
    description: str | None = None
    assignee_id: str | None = None
    due_date: str | None = None
    priority: str | None = None
    status: str | None = None
    meeting_id: str | None = None
