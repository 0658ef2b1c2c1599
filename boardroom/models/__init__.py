"""Entity schemas for the board portal.

This module exports all record kinds used throughout the application:
- Schema / Entity: camelCase wire base and id-carrying base
- User: portal accounts
- BoardMember: board roster
- Meeting: scheduled meetings
- AgendaItem: topics on a meeting's agenda
- Document: catalogued board papers
- ActionItem: follow-ups assigned to members

Each kind comes as ``Insert<Kind>`` (create payload with defaults),
``<Kind>`` (stored record) and, where updatable, ``<Kind>Update``.
"""

from boardroom.models.action_item import ActionItem, ActionItemUpdate, InsertActionItem
from boardroom.models.agenda_item import AgendaItem, AgendaItemUpdate, InsertAgendaItem
from boardroom.models.base import Entity, Schema
from boardroom.models.document import Document, DocumentUpdate, InsertDocument
from boardroom.models.meeting import InsertMeeting, Meeting, MeetingUpdate
from boardroom.models.member import BoardMember, BoardMemberUpdate, InsertBoardMember
from boardroom.models.user import InsertUser, User, UserOut

__all__ = [
    # Base
    "Schema",
    "Entity",
    # Users
    "InsertUser",
    "User",
    "UserOut",
    # Members
    "InsertBoardMember",
    "BoardMember",
    "BoardMemberUpdate",
    # Meetings
    "InsertMeeting",
    "Meeting",
    "MeetingUpdate",
    # Agenda
    "InsertAgendaItem",
    "AgendaItem",
    "AgendaItemUpdate",
    # Documents
    "InsertDocument",
    "Document",
    "DocumentUpdate",
    # Action items
    "InsertActionItem",
    "ActionItem",
    "ActionItemUpdate",
]
