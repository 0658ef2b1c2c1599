"""API router aggregation."""

from fastapi import APIRouter

from boardroom.api.agenda import router as agenda_router
from boardroom.api.crud import build_crud_router
from boardroom.api.dashboard import router as dashboard_router
from boardroom.api.resources import RESOURCES
from boardroom.api.users import router as users_router
from boardroom.config import settings

api_router = APIRouter(prefix=settings.api_prefix)
# Nested agenda listing lives beside the meetings CRUD routes
api_router.include_router(agenda_router)
for resource in RESOURCES:
    api_router.include_router(build_crud_router(resource))
api_router.include_router(users_router)
api_router.include_router(dashboard_router)
