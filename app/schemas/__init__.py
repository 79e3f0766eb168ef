"""Pydantic request/response schemas for the API."""

from app.schemas.activity_log import ActivityLogResponse
from app.schemas.analytics import DashboardStatsResponse
from app.schemas.board_task import BoardTaskCreateRequest, BoardTaskResponse
from app.schemas.catalog import ProjectResponse, SectorResponse, UserResponse
from app.schemas.chat import ChatChannelResponse, ChatMessageResponse
from app.schemas.health import HealthResponse
from app.schemas.history import WeekClosingResponse, WeeklyHistoryResponse
from app.schemas.task import TaskCreateRequest, TaskResponse
from app.schemas.websocket import WebSocketStatusResponse

__all__ = [
    "ActivityLogResponse",
    "BoardTaskCreateRequest",
    "BoardTaskResponse",
    "ChatChannelResponse",
    "ChatMessageResponse",
    "DashboardStatsResponse",
    "HealthResponse",
    "ProjectResponse",
    "SectorResponse",
    "TaskCreateRequest",
    "TaskResponse",
    "UserResponse",
    "WebSocketStatusResponse",
    "WeekClosingResponse",
    "WeeklyHistoryResponse",
]
