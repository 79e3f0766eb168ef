"""WebSocket connection manager.

Used by the WebSocket endpoint and subscribed to the state cache so clients
learn which tables were refreshed.
"""

from app.api.websocket.manager import ConnectionManager

__all__ = ["ConnectionManager"]
