"""Activity feed API: latest entries from the state cache."""

from fastapi import APIRouter

from app.api.v1.dependencies import CacheDep, CurrentUser
from app.schemas.activity_log import ActivityLogResponse

router = APIRouter()


@router.get("", response_model=list[ActivityLogResponse])
async def list_activity_logs(cache: CacheDep, _: CurrentUser):
    """Most recent entries, newest first, with the author name resolved."""
    return [
        ActivityLogResponse(
            id=entry.id,
            user_id=entry.user_id,
            user_name=cache.resolve_user_name(entry.user_id),
            action=entry.action,
            description=entry.description,
            timestamp=entry.timestamp,
        )
        for entry in cache.activity_logs()
    ]
