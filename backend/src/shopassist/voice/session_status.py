"""SessionStatus state machine for the realtime voice connection."""

from enum import Enum
from typing import Dict, List


class SessionStatus(str, Enum):
    """Voice session connection status

    State flow:
    DISCONNECTED → CONNECTING → CONNECTED
    CONNECTING or CONNECTED → ERROR
    any non-DISCONNECTED state → DISCONNECTED
    ERROR can reconnect via CONNECTING
    """
    DISCONNECTED = "disconnected"  # Initial and final state
    CONNECTING = "connecting"      # Token requested, transport opening
    CONNECTED = "connected"        # Agent is live
    ERROR = "error"                # Connect failed or transport reported an error


ALLOWED_TRANSITIONS: Dict[SessionStatus, List[SessionStatus]] = {
    SessionStatus.DISCONNECTED: [SessionStatus.CONNECTING],
    SessionStatus.CONNECTING: [SessionStatus.CONNECTED, SessionStatus.ERROR, SessionStatus.DISCONNECTED],
    SessionStatus.CONNECTED: [SessionStatus.ERROR, SessionStatus.DISCONNECTED],
    SessionStatus.ERROR: [SessionStatus.CONNECTING, SessionStatus.DISCONNECTED],
}


class InvalidSessionTransition(Exception):
    """Raised when a status change is not allowed."""

    def __init__(self, from_status: SessionStatus, to_status: SessionStatus):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Invalid session transition: {from_status.value} -> {to_status.value}")


def can_transition(from_status: SessionStatus, to_status: SessionStatus) -> bool:
    """Validate if a status transition is allowed

    Example:
        >>> can_transition(SessionStatus.DISCONNECTED, SessionStatus.CONNECTING)
        True
        >>> can_transition(SessionStatus.DISCONNECTED, SessionStatus.CONNECTED)
        False
    """
    return to_status in ALLOWED_TRANSITIONS.get(from_status, [])
