"""Voice session: connection lifecycle, transcript history and tool dispatch.

One VoiceSession per user connection, owned by the caller. The transport
pushes realtime events into handle_event; the session keeps the visible
message history and answers function calls through the tool adapter.
"""

import json
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..tools.adapter import ShoppingToolAdapter
from .agent_config import AgentConfig
from .ephemeral_token import EphemeralTokenClient
from .session_status import InvalidSessionTransition, SessionStatus, can_transition
from .transport import RealtimeTransportPort

logger = logging.getLogger(__name__)

# Content part types that carry displayable text, in lookup order per part
_TEXT_PARTS = {
    "input_audio": "transcript",
    "output_audio": "transcript",
    "input_text": "text",
    "output_text": "text",
}


@dataclass
class Message:
    """One conversation turn as shown to the user."""
    id: str
    role: str  # user | assistant | system
    content: str = ""


class SessionNotConnectedError(Exception):
    """Raised when sending on a session that is not connected."""
    pass


def extract_message_content(item: Dict[str, Any]) -> str:
    """First text or transcript found in a message item's content parts."""
    for part in item.get("content") or []:
        key = _TEXT_PARTS.get(part.get("type"))
        if key:
            return part.get(key) or ""
    return ""


class VoiceSession:
    """Realtime voice conversation with the commerce agent.

    Example:
        session = VoiceSession(transport, token_client, ShoppingToolAdapter(engine))
        await session.connect()
        await session.send_text("show me red sneakers under $50")
        ...
        await session.disconnect()
    """

    def __init__(
        self,
        transport: RealtimeTransportPort,
        token_client: EphemeralTokenClient,
        tools: ShoppingToolAdapter,
        agent_config: Optional[AgentConfig] = None,
        on_disconnect: Optional[Callable[[List[Message]], None]] = None,
        session_id: Optional[str] = None,
    ):
        self.transport = transport
        self.token_client = token_client
        self.tools = tools
        self.agent_config = agent_config or AgentConfig.from_settings()
        self.on_disconnect = on_disconnect
        self.session_id = session_id or uuid.uuid4().hex
        self._status = SessionStatus.DISCONNECTED
        self._messages: List[Message] = []

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_connected(self) -> bool:
        return self._status == SessionStatus.CONNECTED

    @property
    def messages(self) -> List[Message]:
        return list(self._messages)

    def _set_status(self, new_status: SessionStatus):
        if not can_transition(self._status, new_status):
            raise InvalidSessionTransition(self._status, new_status)
        logger.info(
            f"Voice session {self._status.value} -> {new_status.value}",
            extra={"session_id": self.session_id},
        )
        self._status = new_status

    async def connect(self):
        """Mint an ephemeral token and open the transport.

        On failure the session moves to ERROR and the exception propagates.
        """
        self._set_status(SessionStatus.CONNECTING)
        try:
            token = await self.token_client.create()
            config = self.agent_config.session_config(self.tools.definitions())
            await self.transport.connect(token["value"], config)
        except Exception as e:
            logger.error(f"Failed to connect voice session: {e}", extra={"session_id": self.session_id})
            self._set_status(SessionStatus.ERROR)
            raise
        self._set_status(SessionStatus.CONNECTED)

    async def disconnect(self):
        """Close the transport, clear history and hand the snapshot to on_disconnect."""
        if self._status == SessionStatus.DISCONNECTED:
            return

        snapshot = list(self._messages)
        try:
            await self.transport.close()
        finally:
            self._messages = []
            self._set_status(SessionStatus.DISCONNECTED)

        if self.on_disconnect and snapshot:
            self.on_disconnect(snapshot)

    async def send_text(self, text: str):
        """Send a typed message. The transport echoes it back via history_added."""
        if self._status != SessionStatus.CONNECTED:
            raise SessionNotConnectedError(f"Voice session is {self._status.value}")
        await self.transport.send_message(text)

    async def handle_event(self, event: Dict[str, Any]):
        """Apply one realtime event to the session."""
        event_type = event.get("type")

        if event_type == "history_added":
            self._on_history_added(event.get("item") or {})
        elif event_type == "conversation.item.input_audio_transcription.completed":
            message = self._find(event.get("item_id"))
            if message is not None:
                message.content = event.get("transcript") or ""
        elif event_type == "response.output_audio_transcript.delta":
            message = self._find(event.get("item_id"))
            if message is not None:
                message.content += event.get("delta") or ""
        elif event_type == "response.function_call_arguments.done":
            await self._on_function_call(event)
        elif event_type == "error":
            logger.error(f"Voice session error: {event.get('error')}", extra={"session_id": self.session_id})
            if can_transition(self._status, SessionStatus.ERROR):
                self._set_status(SessionStatus.ERROR)
        else:
            logger.debug(f"Ignoring realtime event {event_type}")

    def _find(self, item_id: Optional[str]) -> Optional[Message]:
        for message in self._messages:
            if message.id == item_id:
                return message
        return None

    def _on_history_added(self, item: Dict[str, Any]):
        if item.get("type") != "message":
            return
        item_id = item.get("item_id") or item.get("id") or uuid.uuid4().hex
        # Existing messages are never overwritten; transcripts fill them in
        if self._find(item_id) is not None:
            return
        self._messages.append(
            Message(id=item_id, role=item.get("role", "assistant"), content=extract_message_content(item))
        )

    async def _on_function_call(self, event: Dict[str, Any]):
        call_id = event.get("call_id")
        name = event.get("name", "")
        result = await self.tools.invoke(name, event.get("arguments"))
        await self.transport.send_tool_output(call_id, json.dumps(result.to_payload()))
