"""AgendaItem model for meeting agendas."""

from pydantic import Field

from boardroom.models.base import Entity, Schema


class InsertAgendaItem(Schema):
    """Fields accepted when adding an item to a meeting's agenda."""

    meeting_id: str = Field(description="Meeting this item belongs to")
    title: str = Field(description="Agenda topic")
    description: str | None = Field(default=None, description="Topic details")
    duration: int = Field(default=15, description="Allotted time in minutes")
    order: int = Field(default=0, description="Position within the agenda")
    presenter: str | None = Field(default=None, description="Who presents it")


class AgendaItem(InsertAgendaItem, Entity):
    """One topic on a meeting's agenda."""


class AgendaItemUpdate(Schema):
    """Partial update for an agenda item."""

    meeting_id: str | None = None
    title: str | None = None
    description: str | None = None
    duration: int | None = None
    order: int | None = None
    presenter: str | None = None
