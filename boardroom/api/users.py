"""User registration endpoints."""

import structlog
from fastapi import APIRouter, Depends

from boardroom.api.crud import failure_as
from boardroom.api.deps import get_storage
from boardroom.api.errors import ApiError
from boardroom.models import InsertUser, UserOut
from boardroom.storage import Storage, UsernameTakenError

logger = structlog.get_logger()

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, response_model=UserOut)
async def create_user(
    payload: InsertUser,
    storage: Storage = Depends(get_storage),
) -> UserOut:
    """Register a user.

    Returns 409 if the username is already taken. The password is never
    echoed back.
    """
    try:
        user = await storage.create_user(payload)
    except UsernameTakenError:
        logger.info("username_taken", username=payload.username)
        raise ApiError(409, "Username already exists") from None
    except Exception as exc:
        logger.exception("request_failed", error="Failed to create user")
        raise ApiError(500, "Failed to create user") from exc
    logger.info("user_registered", id=user.id)
    return UserOut.model_validate(user)


@router.get("/{user_id}", response_model=UserOut)
async def get_user(
    user_id: str,
    storage: Storage = Depends(get_storage),
) -> UserOut:
    """Get a user by id."""
    with failure_as("Failed to fetch user", kind="user"):
        user = await storage.users.get(user_id)
    if user is None:
        raise ApiError(404, "User not found")
    return UserOut.model_validate(user)
