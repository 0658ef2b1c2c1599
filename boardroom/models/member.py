"""BoardMember model for the board roster."""

from pydantic import Field

from boardroom.models.base import Entity, Schema


class InsertBoardMember(Schema):
    """Fields accepted when adding a member to the board roster."""

    name: str = Field(description="Full name")
    role: str = Field(description="Board role (Chairperson, Treasurer, ...)")
    email: str = Field(description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone number")
    avatar: str | None = Field(default=None, description="Avatar image URL")
    status: str = Field(default="active", description="Membership status")


class BoardMember(InsertBoardMember, Entity):
    """A person serving on the board.

    Referenced by ``ActionItem.assignee_id``.
    """


class BoardMemberUpdate(Schema):
    """Partial update for a board member."""

    name: str | None = None
    role: str | None = None
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
    status: str | None = None
