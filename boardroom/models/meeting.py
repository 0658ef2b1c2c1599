"""Meeting model for scheduled board meetings."""

from pydantic import Field

from boardroom.models.base import Entity, Schema


class InsertMeeting(Schema):
    """Fields accepted when scheduling a meeting.

    ``date`` and ``time`` are kept as the strings the client sent
    (``2025-03-14`` / ``10:00``); the store does not interpret them.
    """

    title: str = Field(description="Meeting title")
    description: str | None = Field(default=None, description="Meeting purpose")
    date: str = Field(description="Meeting date (ISO format)")
    time: str = Field(description="Start time")
    location: str | None = Field(default=None, description="Room or video link")
    status: str = Field(default="scheduled", description="Lifecycle status")
    meeting_type: str = Field(
        default="regular",
        description="Kind of meeting (regular, special, annual, committee)",
    )


class Meeting(InsertMeeting, Entity):
    """A board meeting.

    Agenda items, documents and action items point at a meeting through
    their ``meeting_id``. Deleting the meeting leaves those references as is.
    """


class MeetingUpdate(Schema):
    """Partial update for a meeting."""

    title: str | None = None
    description: str | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    status: str | None = None
    meeting_type: str | None = None
