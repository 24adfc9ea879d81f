"""Unit tests for the SessionStatus state machine"""

import pytest

from shopassist.voice.session_status import (
    ALLOWED_TRANSITIONS,
    InvalidSessionTransition,
    SessionStatus,
    can_transition,
)


class TestSessionStatusTransitions:
    """Test allowed and forbidden status transitions"""

    @pytest.mark.parametrize(
        "from_status,to_status",
        [
            (SessionStatus.DISCONNECTED, SessionStatus.CONNECTING),
            (SessionStatus.CONNECTING, SessionStatus.CONNECTED),
            (SessionStatus.CONNECTING, SessionStatus.ERROR),
            (SessionStatus.CONNECTED, SessionStatus.ERROR),
            (SessionStatus.CONNECTED, SessionStatus.DISCONNECTED),
            (SessionStatus.CONNECTING, SessionStatus.DISCONNECTED),
            (SessionStatus.ERROR, SessionStatus.DISCONNECTED),
            (SessionStatus.ERROR, SessionStatus.CONNECTING),
        ],
    )
    def test_allowed(self, from_status, to_status):
        assert can_transition(from_status, to_status)

    @pytest.mark.parametrize(
        "from_status,to_status",
        [
            (SessionStatus.DISCONNECTED, SessionStatus.CONNECTED),
            (SessionStatus.DISCONNECTED, SessionStatus.ERROR),
            (SessionStatus.CONNECTED, SessionStatus.CONNECTING),
            (SessionStatus.ERROR, SessionStatus.CONNECTED),
        ],
    )
    def test_forbidden(self, from_status, to_status):
        assert not can_transition(from_status, to_status)

    def test_disconnected_only_starts_connecting(self):
        assert ALLOWED_TRANSITIONS[SessionStatus.DISCONNECTED] == [SessionStatus.CONNECTING]

    def test_status_values_are_lowercase(self):
        assert {s.value for s in SessionStatus} == {"disconnected", "connecting", "connected", "error"}

    def test_invalid_transition_message(self):
        error = InvalidSessionTransition(SessionStatus.DISCONNECTED, SessionStatus.CONNECTED)

        assert "disconnected -> connected" in str(error)
