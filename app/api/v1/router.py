"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    activity_logs,
    analytics,
    board_tasks,
    catalog,
    chat,
    health,
    history,
    planning,
    tasks,
    websocket as ws_endpoint,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(board_tasks.router, prefix="/board-tasks", tags=["board"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(planning.router, prefix="/planning", tags=["planning"])
api_router.include_router(catalog.router, tags=["catalog"])
api_router.include_router(
    activity_logs.router, prefix="/activity-logs", tags=["activity-logs"]
)
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
api_router.include_router(ws_endpoint.router, prefix="/ws", tags=["websocket"])
