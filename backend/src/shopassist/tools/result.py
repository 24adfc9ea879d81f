"""Typed result contract at the voice-agent boundary.

A tool call never raises into the agent: it returns either ToolSuccess or
ToolFailure, and the agent decides how to continue the conversation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


class ToolErrorCode(str, Enum):
    """Failure kinds surfaced to the agent."""
    PROVIDER_FAILURE = "provider_failure"      # search could not be attempted
    NOT_FOUND = "not_found"                    # image reference did not resolve
    INVALID_ARGUMENTS = "invalid_arguments"    # arguments failed validation
    UNKNOWN_TOOL = "unknown_tool"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ToolSuccess:
    """Successful call; an empty list means zero matches."""
    data: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True

    def to_payload(self) -> List[Dict[str, Any]]:
        return self.data


@dataclass(frozen=True)
class ToolFailure:
    """Failed call with a human-readable error and a machine-readable code."""
    error: str
    code: ToolErrorCode

    @property
    def ok(self) -> bool:
        return False

    def to_payload(self) -> Dict[str, str]:
        return {"error": self.error, "code": self.code.value}


ToolResult = Union[ToolSuccess, ToolFailure]
