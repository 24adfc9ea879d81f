"""Per-request correlation id, carried in a ContextVar.

The id is bound for the duration of one HTTP request and read by the
logging filter; outside a request it reads as "no-request-id".
"""

import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional

NO_REQUEST_ID = "no-request-id"

# Accept caller-supplied ids only if they are short and header-safe
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def new_request_id() -> str:
    return uuid.uuid4().hex


def accept_request_id(candidate: Optional[str]) -> str:
    """Reuse an incoming X-Request-ID when well formed, otherwise mint one."""
    if candidate and _VALID_REQUEST_ID.match(candidate):
        return candidate
    return new_request_id()


def current_request_id() -> str:
    return request_id_var.get() or NO_REQUEST_ID


def bind_request_id(request_id: str) -> Token:
    """Bind request_id to the current context; pass the token to reset_request_id."""
    return request_id_var.set(request_id)


def reset_request_id(token: Token) -> None:
    request_id_var.reset(token)
