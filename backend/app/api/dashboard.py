"""Dashboard and timeline views computed from the caller's current data."""
from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_storage, storage_errors
from app.schemas.dashboard import DashboardResponse, TimelineViewResponse
from app.services import planning_stats
from app.storage import Record, Storage

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    current_user: Record = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Countdown, progress figures and next tasks (dashboard view)."""
    user_id = current_user["id"]
    with storage_errors("fetching dashboard"):
        settings = await storage.wedding_settings.get_by_user(user_id)
        tasks = await storage.tasks.list(user_id)
        guests = await storage.guests.list(user_id)
        categories = await storage.budget_categories.list(user_id)

    wedding_date = settings.get("wedding_date") if settings else None
    return DashboardResponse(
        wedding_date=wedding_date,
        days_remaining=planning_stats.days_remaining(wedding_date),
        tasks=planning_stats.task_progress(tasks),
        rsvp=planning_stats.rsvp_summary(guests),
        budget=planning_stats.budget_summary(categories),
        upcoming_tasks=planning_stats.upcoming_tasks(tasks),
        priority_tasks=planning_stats.priority_tasks(tasks),
    )


@router.get("/timeline-view", response_model=TimelineViewResponse)
async def get_timeline_view(
    current_user: Record = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Dated tasks and timeline events merged in calendar order."""
    user_id = current_user["id"]
    with storage_errors("fetching timeline"):
        settings = await storage.wedding_settings.get_by_user(user_id)
        tasks = await storage.tasks.list(user_id)
        events = await storage.timeline_events.list(user_id)

    wedding_date = settings.get("wedding_date") if settings else None
    return TimelineViewResponse(
        wedding_date=wedding_date,
        entries=planning_stats.build_timeline(tasks, events, wedding_date),
    )
