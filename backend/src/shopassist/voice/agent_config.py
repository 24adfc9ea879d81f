"""Configuration for the commerce voice agent."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config import Settings, settings as default_settings

AGENT_INSTRUCTIONS = """You are an AI shopping assistant for an e-commerce platform. Your role is to help users discover and find products through natural conversation.

Key behaviors:
- Be friendly, helpful, and concise
- Use the searchProductsByText tool when users describe what they're looking for
- Use the searchProductsByImage tool when users upload images to find similar products
- Use the listCategories tool when users want to narrow a search to a category
- Present product recommendations clearly with name, brand, price, and brief description
- Ask clarifying questions about budget, preferences, or specific features when helpful
- After showing search results, offer to refine the search or help with other questions

Always respond with the search results after executing a tool so users know what you found."""


@dataclass(frozen=True)
class AgentConfig:
    """Agent identity and realtime model settings.

    Attributes:
        name: Agent display name
        model: Realtime model
        instructions: System instructions
        transcription_model: Model used to transcribe user audio
    """
    name: str = "Commerce Assistant"
    model: str = "gpt-realtime-mini"
    instructions: str = AGENT_INSTRUCTIONS
    transcription_model: str = "whisper-1"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AgentConfig":
        settings = settings or default_settings
        return cls(
            model=settings.REALTIME_MODEL,
            transcription_model=settings.REALTIME_TRANSCRIPTION_MODEL,
        )

    def session_config(self, tools: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Realtime session configuration with transcription and tools enabled."""
        return {
            "type": "realtime",
            "model": self.model,
            "instructions": self.instructions,
            "audio": {
                "input": {
                    "transcription": {"model": self.transcription_model},
                },
            },
            "tools": tools,
            "tool_choice": "auto",
        }
