"""Realtime voice session support."""

from .agent_config import AgentConfig
from .ephemeral_token import EphemeralTokenClient
from .session import Message, SessionNotConnectedError, VoiceSession, extract_message_content
from .session_status import InvalidSessionTransition, SessionStatus, can_transition
from .transport import RealtimeTransportPort

__all__ = [
    "AgentConfig",
    "EphemeralTokenClient",
    "InvalidSessionTransition",
    "Message",
    "RealtimeTransportPort",
    "SessionNotConnectedError",
    "SessionStatus",
    "VoiceSession",
    "can_transition",
    "extract_message_content",
]
