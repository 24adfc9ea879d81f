"""Tool-call adapter exposing search to the voice agent."""

from .adapter import ShoppingToolAdapter, ToolDefinition
from .result import ToolErrorCode, ToolFailure, ToolResult, ToolSuccess

__all__ = [
    "ShoppingToolAdapter",
    "ToolDefinition",
    "ToolErrorCode",
    "ToolFailure",
    "ToolResult",
    "ToolSuccess",
]
