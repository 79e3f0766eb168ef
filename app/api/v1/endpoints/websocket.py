"""WebSocket endpoint: pushes cache refresh events to connected clients.

Uses only the ConnectionManager on app.state.ws_manager (set in lifespan).
Browsers cannot set the identity header on a WebSocket handshake, so the
profile id is passed as ``?user_id=...`` and checked against the cache.
"""

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect

from app.schemas.websocket import WebSocketStatusResponse

router = APIRouter()


async def _reject_websocket(websocket: WebSocket, reason: str, code: int = 1008) -> None:
    """Accept then immediately close with code/reason so client gets a proper close frame."""
    await websocket.accept()
    await websocket.close(code=code, reason=reason)


@router.websocket("")
async def websocket_endpoint(websocket: WebSocket):
    """Register a known profile and keep the socket open until the client leaves.

    Clients receive ``{"type": "cache.refreshed", "tables": [...]}`` after every
    write and re-fetch the listed resources. Incoming text is answered with
    ``pong`` as a keepalive.
    """
    manager = websocket.app.state.ws_manager
    cache = websocket.app.state.state_cache
    user_id = (websocket.query_params.get("user_id") or "").strip()
    if not user_id:
        await _reject_websocket(websocket, "Missing user_id")
        return
    if cache.get_user(user_id) is None:
        await _reject_websocket(websocket, "Unknown profile")
        return
    await manager.connect(websocket, user_id)
    try:
        while True:
            await websocket.receive_text()
            await websocket.send_text("pong")
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)


@router.get("/status", response_model=WebSocketStatusResponse)
async def websocket_status(request: Request) -> WebSocketStatusResponse:
    """Number of open WebSocket connections."""
    manager = request.app.state.ws_manager
    return WebSocketStatusResponse(total_connections=await manager.get_connection_count())
