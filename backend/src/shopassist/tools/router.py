"""Tool invocation endpoints for the voice client.

The browser-side realtime session forwards function calls here and relays
the payload back to the agent. Failures are returned as 200 with an
{"error", "code"} body so the conversation can continue.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from ..dependencies import get_tool_adapter
from .adapter import ShoppingToolAdapter

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("")
def list_tools(adapter: ShoppingToolAdapter = Depends(get_tool_adapter)):
    """Tool definitions to register with the realtime agent."""
    return adapter.definitions()


@router.post("/{name}")
async def invoke_tool(
    name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    adapter: ShoppingToolAdapter = Depends(get_tool_adapter),
):
    """Invoke a tool by name with JSON arguments."""
    result = await adapter.invoke(name, arguments)
    return result.to_payload()
