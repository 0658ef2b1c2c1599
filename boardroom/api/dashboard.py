"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from boardroom.api.crud import failure_as
from boardroom.api.deps import get_storage
from boardroom.dashboard import DashboardSummary, build_dashboard
from boardroom.storage import Storage

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
async def get_dashboard(storage: Storage = Depends(get_storage)) -> DashboardSummary:
    """Get headline counts and upcoming items for the dashboard."""
    with failure_as("Failed to fetch dashboard"):
        return await build_dashboard(storage)
