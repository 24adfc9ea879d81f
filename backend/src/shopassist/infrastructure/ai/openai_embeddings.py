"""OpenAI Embedding Adapter - Implementation of EmbeddingProviderPort using OpenAI API.

Text embeddings come from text-embedding-3-small (1536 dimensions); image
captions come from a vision-capable chat model (gpt-4o-mini by default).

Architecture: Hexagonal - Infrastructure adapter implementing domain port
"""

import time
from typing import Optional

from openai import AsyncOpenAI, APIError, APITimeoutError, RateLimitError, AuthenticationError

from ...config import settings
from ...domain.ai import (
    EmbeddingProviderPort,
    EmbeddingResult,
    ImageDescription,
    ProviderFailure,
    ProviderTimeoutError,
    ProviderRateLimitError,
    ProviderAuthError,
    ProviderServiceError,
    ProviderInvalidResponseError,
)
from ...observability.logging_config import get_logger
from ...observability.metrics import provider_calls_total, provider_latency_ms

logger = get_logger(__name__)

IMAGE_DESCRIPTION_PROMPT = (
    "Describe this product image in detail, focusing on visual features, colors, "
    "materials, and overall appearance. Be concise but thorough for search purposes."
)


class OpenAIEmbeddingAdapter(EmbeddingProviderPort):
    """OpenAI implementation of EmbeddingProviderPort.

    Configuration (settings / environment variables):
        OPENAI_API_KEY: OpenAI API key (required)
        EMBEDDING_MODEL: Embedding model (default: text-embedding-3-small)
        EMBEDDING_DIMENSION: Expected vector length (default: 1536)
        VISION_MODEL: Caption model (default: gpt-4o-mini)
        VISION_MAX_TOKENS: Caption length cap (default: 300)

    Example Usage:
        adapter = OpenAIEmbeddingAdapter()
        result = await adapter.embed_text("wireless headphones")
        caption = await adapter.describe_image("https://.../shoe.png")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
        embedding_model: Optional[str] = None,
        dimension: Optional[int] = None,
        vision_model: Optional[str] = None,
        vision_max_tokens: Optional[int] = None,
    ):
        """Initialize OpenAI embedding adapter.

        Args:
            api_key: OpenAI API key (if None, reads OPENAI_API_KEY from settings)
            client: Pre-built AsyncOpenAI client (tests inject a mock here)

        Raises:
            ProviderAuthError: If no client is given and no API key is configured
        """
        self.embedding_model = embedding_model or settings.EMBEDDING_MODEL
        self.dimension = dimension or settings.EMBEDDING_DIMENSION
        self.vision_model = vision_model or settings.VISION_MODEL
        self.vision_max_tokens = vision_max_tokens or settings.VISION_MAX_TOKENS

        if client is not None:
            self.client = client
            return

        api_key = api_key or settings.OPENAI_API_KEY
        if not api_key:
            raise ProviderAuthError("OPENAI_API_KEY not provided and not found in environment")
        self.client = AsyncOpenAI(api_key=api_key)

    async def embed_text(self, text: str) -> EmbeddingResult:
        """Generate embedding vector for text using OpenAI API.

        Raises:
            ValueError: If text is empty
            ProviderFailure: On API errors or a vector of unexpected dimension
        """
        if not text or not text.strip():
            raise ValueError("Text cannot be empty")

        start_time = time.time()
        try:
            response = await self.client.embeddings.create(
                model=self.embedding_model,
                input=text,
            )

            if not response.data:
                raise ProviderInvalidResponseError("No embedding returned from API")

            embedding = list(response.data[0].embedding)
            if len(embedding) != self.dimension:
                raise ProviderInvalidResponseError(
                    f"Embedding dimension {len(embedding)} does not match expected {self.dimension}"
                )

            tokens = response.usage.total_tokens if response.usage else 0
            self._record("embedding", "success", start_time)
            return EmbeddingResult(
                embedding=embedding,
                model=self.embedding_model,
                dimension=len(embedding),
                tokens=tokens,
            )

        except (ProviderFailure, ValueError):
            self._record("embedding", "error", start_time)
            raise
        except Exception as e:
            self._record("embedding", "error", start_time)
            raise self._translate_error(e) from e

    async def describe_image(self, image_url: str) -> ImageDescription:
        """Caption an image with the configured vision model.

        Raises:
            ValueError: If image_url is empty
            ProviderFailure: On API errors or an empty caption
        """
        if not image_url or not image_url.strip():
            raise ValueError("Image URL cannot be empty")

        start_time = time.time()
        try:
            response = await self.client.chat.completions.create(
                model=self.vision_model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": IMAGE_DESCRIPTION_PROMPT},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    }
                ],
                max_tokens=self.vision_max_tokens,
            )

            if not response.choices:
                raise ProviderInvalidResponseError("No choices returned from vision model")

            description = (response.choices[0].message.content or "").strip()
            if not description:
                raise ProviderInvalidResponseError("Vision model returned an empty description")

            tokens = response.usage.total_tokens if response.usage else 0
            self._record("caption", "success", start_time)
            logger.debug(f"Image described with {tokens} tokens: {description[:80]}")
            return ImageDescription(
                description=description,
                model=self.vision_model,
                tokens=tokens,
            )

        except (ProviderFailure, ValueError):
            self._record("caption", "error", start_time)
            raise
        except Exception as e:
            self._record("caption", "error", start_time)
            raise self._translate_error(e) from e

    def _translate_error(self, error: Exception) -> Exception:
        """Map OpenAI SDK errors onto the ProviderFailure hierarchy."""
        if isinstance(error, AuthenticationError):
            return ProviderAuthError(f"OpenAI authentication failed: {error}")
        if isinstance(error, RateLimitError):
            return ProviderRateLimitError(f"OpenAI rate limit exceeded: {error}")
        if isinstance(error, APITimeoutError):
            return ProviderTimeoutError(f"OpenAI request timed out: {error}")
        if isinstance(error, APIError):
            return ProviderServiceError(f"OpenAI API error: {error}")
        return ProviderInvalidResponseError(f"Unexpected error from OpenAI: {error}")

    def _record(self, call_type: str, status: str, start_time: float) -> None:
        latency_ms = (time.time() - start_time) * 1000
        provider_calls_total.labels(call_type=call_type, status=status).inc()
        provider_latency_ms.labels(call_type=call_type).observe(latency_ms)
