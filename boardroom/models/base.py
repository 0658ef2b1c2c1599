"""Base classes for all entity schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Schema(BaseModel):
    """Base class for wire-facing models.

    Provides:
    - camelCase aliases for JSON (``meetingId``, ``dueDate``)
    - population by either the alias or the Python field name
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Entity(Schema):
    """A stored record: insert fields plus a store-assigned identifier."""

    id: str = Field(min_length=1, description="Unique entity identifier")
