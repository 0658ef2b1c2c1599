"""Document model for board papers."""

from pydantic import Field

from boardroom.models.base import Entity, Schema


class InsertDocument(Schema):
    """Fields accepted when cataloguing a document."""

    title: str = Field(description="Document title")
    type: str = Field(description="File type (pdf, docx, xlsx)")
    category: str = Field(description="Category (agenda, minutes, financial, ...)")
    uploaded_by: str = Field(description="Name of the uploader")
    uploaded_at: str = Field(description="Upload date (ISO format)")
    size: str = Field(description="Human readable file size")
    meeting_id: str | None = Field(
        default=None,
        description="Meeting the document was tabled at",
    )


class Document(InsertDocument, Entity):
    """A catalogued board document."""


class DocumentUpdate(Schema):
    """Partial update for a document."""

    title: str | None = None
    type: str | None = None
    category: str | None = None
    uploaded_by: str | None = None
    uploaded_at: str | None = None
    size: str | None = None
    meeting_id: str | None = None
