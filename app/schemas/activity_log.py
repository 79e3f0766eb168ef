"""Activity log API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.domain.enums import ActivityAction


class ActivityLogResponse(BaseModel):
    """One activity feed entry, newest first in lists."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    user_name: str = ""
    action: ActivityAction
    description: str
    timestamp: datetime
