"""WebSocket connection manager.

Holds active connections per profile and broadcasts cache refresh events to
every client. Use via app.state.ws_manager (set in lifespan).
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import WebSocket

from app.schemas.websocket import CacheRefreshedEvent


class ConnectionManager:
    """Manages WebSocket connections keyed by profile id.

    - A profile may hold several connections (tabs).
    - connection_count is lock-protected for concurrent access.
    """

    def __init__(self) -> None:
        self._connections_by_user: dict[str, set[WebSocket]] = {}
        self._websocket_to_user: dict[WebSocket, str] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket, user_id: str) -> None:
        """Accept and register a new connection for user_id."""
        await websocket.accept()
        async with self._lock:
            self._connections_by_user.setdefault(user_id, set()).add(websocket)
            self._websocket_to_user[websocket] = user_id

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection (call on disconnect)."""
        async with self._lock:
            self._forget(websocket)

    def _forget(self, websocket: WebSocket) -> None:
        user_id = self._websocket_to_user.pop(websocket, None)
        if user_id and user_id in self._connections_by_user:
            conns = self._connections_by_user[user_id]
            conns.discard(websocket)
            if not conns:
                del self._connections_by_user[user_id]

    async def broadcast(self, message: str | dict[str, Any]) -> None:
        """Send a message to all connected clients."""
        async with self._lock:
            snapshot = [ws for conns in self._connections_by_user.values() for ws in conns]
        await self._send_to_list(snapshot, message)

    async def on_cache_refreshed(self, tables: frozenset[str]) -> None:
        """StateCache listener: tell clients which tables changed."""
        await self.broadcast(CacheRefreshedEvent(tables=sorted(tables)).model_dump())

    async def _send_to_list(
        self,
        connections: list[WebSocket],
        message: str | dict[str, Any],
    ) -> None:
        """Send message to a list of connections; remove dead ones under lock."""
        dead: list[WebSocket] = []
        for ws in connections:
            try:
                if isinstance(message, dict):
                    await ws.send_json(message)
                else:
                    await ws.send_text(message)
            except Exception:
                dead.append(ws)
        if dead:
            async with self._lock:
                for ws in dead:
                    self._forget(ws)

    async def get_connection_count(self) -> int:
        """Return the total number of active connections (lock-safe)."""
        async with self._lock:
            return sum(len(c) for c in self._connections_by_user.values())
