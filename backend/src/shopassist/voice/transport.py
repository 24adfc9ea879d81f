"""Realtime transport port.

Implementations carry audio and events between the user and the realtime
model (WebRTC in the browser, WebSocket on a server). Incoming events are
delivered to VoiceSession.handle_event.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class RealtimeTransportPort(ABC):
    """Port interface for a realtime model connection."""

    @abstractmethod
    async def connect(self, ephemeral_key: str, session_config: Dict[str, Any]) -> None:
        """Open the connection using an ephemeral client secret."""
        pass

    @abstractmethod
    async def close(self) -> None:
        pass

    @abstractmethod
    async def send_message(self, text: str) -> None:
        """Send a user text message into the conversation."""
        pass

    @abstractmethod
    async def send_tool_output(self, call_id: str, output: str) -> None:
        """Return a function call's JSON output to the model."""
        pass
