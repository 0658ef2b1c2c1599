"""Shared FastAPI dependencies."""

from fastapi import Request

from boardroom.api.errors import ApiError
from boardroom.storage import Storage


def get_storage(request: Request) -> Storage:
    """Get Storage from app state."""
    if not hasattr(request.app.state, "storage"):
        raise ApiError(500, "Storage not initialized")
    return request.app.state.storage
