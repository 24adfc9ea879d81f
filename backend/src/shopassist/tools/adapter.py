"""Tool-call adapter for the voice agent.

Exposes searchProductsByText, searchProductsByImage and listCategories as
callable tools. Every invocation logs its arguments and then either its
result count or its error before returning a ToolResult.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ValidationError

from ..domain.ai import ProviderFailure
from ..observability.metrics import tool_invocations_total
from ..search.ports import ImageNotFoundError, InvalidSearchQuery, ProductSearchPort, SearchFilters
from .result import ToolErrorCode, ToolFailure, ToolResult, ToolSuccess
from .schemas import ListCategoriesArgs, SearchProductsByImageArgs, SearchProductsByTextArgs

logger = logging.getLogger(__name__)

# Inline data:image URLs can be megabytes; logged argument strings are cut to this length
LOGGED_VALUE_LIMIT = 200


def _loggable(value: Any) -> Any:
    """Copy of tool arguments with long strings truncated."""
    if isinstance(value, str) and len(value) > LOGGED_VALUE_LIMIT:
        return f"{value[:LOGGED_VALUE_LIMIT]}...<{len(value)} chars>"
    if isinstance(value, dict):
        return {k: _loggable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_loggable(v) for v in value]
    return value


@dataclass(frozen=True)
class ToolDefinition:
    """A tool the agent may call."""
    name: str
    description: str
    arguments: Type[BaseModel]

    def to_schema(self) -> Dict[str, Any]:
        """Function-tool definition in the realtime API format."""
        return {
            "type": "function",
            "name": self.name,
            "description": self.description,
            "parameters": self.arguments.model_json_schema(by_alias=True),
        }


TOOL_DEFINITIONS: List[ToolDefinition] = [
    ToolDefinition(
        name="searchProductsByText",
        description=(
            "Search for products using a text description. Returns up to 10 products ranked by "
            "relevance with name, brand, price, category, description, and image URL."
        ),
        arguments=SearchProductsByTextArgs,
    ),
    ToolDefinition(
        name="searchProductsByImage",
        description=(
            "Search for products similar to an uploaded image. User must upload image first. "
            "Returns up to 10 similar products with details."
        ),
        arguments=SearchProductsByImageArgs,
    ),
    ToolDefinition(
        name="listCategories",
        description="List product categories with their ids, for narrowing a search to one category.",
        arguments=ListCategoriesArgs,
    ),
]


class ShoppingToolAdapter:
    """Dispatches agent tool calls to the search engine.

    Example:
        adapter = ShoppingToolAdapter(engine)
        result = await adapter.invoke("searchProductsByText", {"textQuery": "red sneakers"})
        payload = result.to_payload()
    """

    def __init__(self, search: ProductSearchPort):
        self.search = search
        self._handlers: Dict[str, Callable[[BaseModel], Awaitable[List[Dict[str, Any]]]]] = {
            "searchProductsByText": self._search_by_text,
            "searchProductsByImage": self._search_by_image,
            "listCategories": self._list_categories,
        }
        self._definitions = {d.name: d for d in TOOL_DEFINITIONS}

    def definitions(self) -> List[Dict[str, Any]]:
        """Tool schemas to register with the realtime session."""
        return [d.to_schema() for d in TOOL_DEFINITIONS]

    async def invoke(self, name: str, arguments: Optional[Union[str, Dict[str, Any]]] = None) -> ToolResult:
        """Run a tool and return its typed result. Never raises."""
        logger.info(
            f"Tool call {name}",
            extra={"tool_name": name, "arguments": _loggable(arguments)},
        )

        definition = self._definitions.get(name)
        if definition is None:
            return self._fail(name, f"Unknown tool: {name}", ToolErrorCode.UNKNOWN_TOOL)

        try:
            args = definition.arguments.model_validate(self._decode(arguments))
            data = await self._handlers[name](args)
        except (ValidationError, InvalidSearchQuery, json.JSONDecodeError) as e:
            return self._fail(name, f"Invalid arguments: {e}", ToolErrorCode.INVALID_ARGUMENTS)
        except ProviderFailure as e:
            return self._fail(name, f"Search could not be performed: {e}", ToolErrorCode.PROVIDER_FAILURE)
        except ImageNotFoundError as e:
            return self._fail(name, str(e), ToolErrorCode.NOT_FOUND)
        except Exception as e:
            logger.exception(f"Tool {name} failed unexpectedly")
            return self._fail(name, f"Unexpected error: {e}", ToolErrorCode.INTERNAL_ERROR)

        tool_invocations_total.labels(tool=name, outcome="success").inc()
        logger.info(
            f"Tool {name} returned {len(data)} items",
            extra={"tool_name": name, "result_count": len(data)},
        )
        return ToolSuccess(data=data)

    @staticmethod
    def _decode(arguments: Optional[Union[str, Dict[str, Any]]]) -> Dict[str, Any]:
        """Realtime function calls deliver arguments as a JSON string."""
        if arguments is None or arguments == "":
            return {}
        if isinstance(arguments, str):
            return json.loads(arguments)
        return arguments

    def _fail(self, name: str, message: str, code: ToolErrorCode) -> ToolFailure:
        tool_invocations_total.labels(tool=name, outcome=code.value).inc()
        logger.error(
            f"Tool {name} failed: {message}",
            extra={"tool_name": name, "error_code": code.value},
        )
        return ToolFailure(error=message, code=code)

    async def _search_by_text(self, args: SearchProductsByTextArgs) -> List[Dict[str, Any]]:
        results = await self.search.search_by_text(
            args.text_query,
            SearchFilters(min_price=args.min_price, max_price=args.max_price, category_id=args.category_id),
        )
        return [r.to_dict() for r in results]

    async def _search_by_image(self, args: SearchProductsByImageArgs) -> List[Dict[str, Any]]:
        results = await self.search.search_by_image(
            args.image_url,
            SearchFilters(min_price=args.min_price, max_price=args.max_price, category_id=args.category_id),
        )
        return [r.to_dict() for r in results]

    async def _list_categories(self, args: ListCategoriesArgs) -> List[Dict[str, Any]]:
        categories = await self.search.list_categories()
        return [c.to_dict() for c in categories]
