"""Entity kinds exposed through the generic CRUD routes."""

from boardroom.api.crud import Resource
from boardroom.api.filters import (
    action_item_filter,
    document_filter,
    meeting_filter,
    member_filter,
)
from boardroom.models import (
    ActionItem,
    ActionItemUpdate,
    AgendaItem,
    AgendaItemUpdate,
    BoardMember,
    BoardMemberUpdate,
    Document,
    DocumentUpdate,
    InsertActionItem,
    InsertAgendaItem,
    InsertBoardMember,
    InsertDocument,
    InsertMeeting,
    Meeting,
    MeetingUpdate,
)

MEETINGS = Resource(
    path="meetings",
    attribute="meetings",
    singular="meeting",
    plural="meetings",
    record_model=Meeting,
    insert_model=InsertMeeting,
    update_model=MeetingUpdate,
    filter_dependency=meeting_filter,
)

MEMBERS = Resource(
    path="members",
    attribute="members",
    singular="member",
    plural="members",
    record_model=BoardMember,
    insert_model=InsertBoardMember,
    update_model=BoardMemberUpdate,
    filter_dependency=member_filter,
)

DOCUMENTS = Resource(
    path="documents",
    attribute="documents",
    singular="document",
    plural="documents",
    record_model=Document,
    insert_model=InsertDocument,
    update_model=DocumentUpdate,
    filter_dependency=document_filter,
)

ACTION_ITEMS = Resource(
    path="action-items",
    attribute="action_items",
    singular="action item",
    plural="action items",
    record_model=ActionItem,
    insert_model=InsertActionItem,
    update_model=ActionItemUpdate,
    filter_dependency=action_item_filter,
)

AGENDA_ITEMS = Resource(
    path="agenda-items",
    attribute="agenda_items",
    singular="agenda item",
    plural="agenda items",
    record_model=AgendaItem,
    insert_model=InsertAgendaItem,
    update_model=AgendaItemUpdate,
)

RESOURCES = (MEETINGS, MEMBERS, DOCUMENTS, ACTION_ITEMS, AGENDA_ITEMS)
