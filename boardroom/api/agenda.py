"""Agenda listing nested under a meeting."""

from fastapi import APIRouter, Depends

from boardroom.api.crud import failure_as
from boardroom.api.deps import get_storage
from boardroom.models import AgendaItem
from boardroom.storage import Storage

router = APIRouter(prefix="/meetings", tags=["agenda"])


@router.get("/{meeting_id}/agenda", response_model=list[AgendaItem])
async def get_meeting_agenda(
    meeting_id: str,
    storage: Storage = Depends(get_storage),
) -> list[AgendaItem]:
    """List the agenda items of a meeting, in agenda order.

    The meeting is not looked up: an unknown or deleted meeting id returns
    whatever items still reference it, usually none.
    """
    with failure_as("Failed to fetch agenda items", meeting_id=meeting_id):
        return await storage.list_agenda_items_for_meeting(meeting_id)
