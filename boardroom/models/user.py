"""User model for portal accounts."""

from pydantic import Field

from boardroom.models.base import Entity, Schema


class InsertUser(Schema):
    """Fields required to register a user."""

    username: str = Field(description="Login name")
    password: str = Field(description="Login secret")


class User(InsertUser, Entity):
    """A registered portal user."""


class UserOut(Entity):
    """User as returned over HTTP, without the password."""

    username: str = Field(description="Login name")
