"""Ephemeral client secrets for browser realtime connections.

The long-lived API key stays on the server; browsers receive a short-lived
client secret minted through the realtime API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..domain.ai import ProviderAuthError, ProviderInvalidResponseError, ProviderServiceError, ProviderTimeoutError

logger = logging.getLogger(__name__)


class EphemeralTokenClient:
    """Async HTTP client for POST /realtime/client_secrets."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def close(self):
        await self.client.aclose()

    async def create(self) -> Dict[str, Any]:
        """Mint a client secret. The browser connects with response["value"].

        Raises:
            ProviderAuthError: If no API key is configured or it was rejected
            ProviderTimeoutError: If the request timed out
            ProviderServiceError: On network errors or non-2xx responses
            ProviderInvalidResponseError: If the body is not a JSON object with "value"
        """
        if not self.api_key:
            raise ProviderAuthError("OPENAI_API_KEY is not set")

        try:
            response = await self.client.post(
                "/realtime/client_secrets",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={"session": {"type": "realtime", "model": self.model}},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"Ephemeral token request failed with status {status_code}: {e.response.text}",
                extra={"status_code": status_code},
            )
            if status_code in (401, 403):
                raise ProviderAuthError(f"Realtime API rejected credentials ({status_code})") from e
            raise ProviderServiceError(f"Realtime API request failed with status {status_code}") from e
        except httpx.TimeoutException as e:
            logger.error(f"Ephemeral token request timed out: {e}")
            raise ProviderTimeoutError(f"Ephemeral token request timed out: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error requesting ephemeral token: {e}")
            raise ProviderServiceError(f"Network error requesting ephemeral token: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderInvalidResponseError("Ephemeral token response is not JSON") from e
        if not isinstance(data, dict) or not data.get("value"):
            raise ProviderInvalidResponseError("Ephemeral token response has no client secret value")

        logger.info("Issued realtime ephemeral token", extra={"status_code": response.status_code})
        return data
