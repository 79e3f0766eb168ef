"""Team chat use cases."""

from app.application.use_cases.chat.send_message import ChatService

__all__ = ["ChatService"]
