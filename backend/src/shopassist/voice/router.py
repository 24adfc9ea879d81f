"""Realtime voice endpoints used by the browser client."""

from fastapi import APIRouter, Depends

from ..dependencies import get_agent_config, get_ephemeral_token_client, get_tool_adapter
from ..tools.adapter import ShoppingToolAdapter
from .agent_config import AgentConfig
from .ephemeral_token import EphemeralTokenClient

router = APIRouter(prefix="/api/v1/realtime", tags=["realtime"])


@router.post("/ephemeral-token")
async def create_ephemeral_token(client: EphemeralTokenClient = Depends(get_ephemeral_token_client)):
    """Mint a short-lived client secret for a browser realtime session.

    Provider failures are mapped to 502/504 by the application handlers.
    """
    return await client.create()


@router.get("/session-config")
def get_session_config(
    agent_config: AgentConfig = Depends(get_agent_config),
    adapter: ShoppingToolAdapter = Depends(get_tool_adapter),
):
    """Agent instructions, transcription settings and tool definitions."""
    return agent_config.session_config(adapter.definitions())
