"""Embedding Provider Port - Abstract interface for embedding and caption providers.

Hexagonal Architecture: This is a domain port that infrastructure adapters implement.
The search engine depends on this port, not on concrete implementations (OpenAI, local models, etc).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class EmbeddingResult:
    """Result from embedding generation call.

    Attributes:
        embedding: Vector embedding (list of floats, 1536-dim for text-embedding-3-small)
        model: Model name (e.g., 'text-embedding-3-small')
        dimension: Embedding dimension
        tokens: Number of tokens used
    """
    embedding: list[float]
    model: str
    dimension: int
    tokens: int


@dataclass
class ImageDescription:
    """Natural-language caption generated for an image.

    Attributes:
        description: Caption text used as the query for image search
        model: Vision model name (e.g., 'gpt-4o-mini')
        tokens: Number of tokens used
    """
    description: str
    model: str
    tokens: int


class EmbeddingProviderPort(ABC):
    """Abstract interface for embedding providers.

    Implementations must handle:
    - API authentication
    - Request formatting and response parsing
    - Translating provider errors into the ProviderFailure hierarchy

    Calls are remote, metered and not memoized by callers.

    Example Usage:
        provider = OpenAIEmbeddingAdapter()
        result = await provider.embed_text("red sneakers")
        # result.embedding is list[float] of length 1536
    """

    @abstractmethod
    async def embed_text(self, text: str) -> EmbeddingResult:
        """Generate embedding vector for text.

        Raises:
            ValueError: If text is empty
            ProviderFailure: If the provider call fails or returns a malformed vector
        """
        pass

    @abstractmethod
    async def describe_image(self, image_url: str) -> ImageDescription:
        """Generate a search-oriented description of the image at image_url.

        Raises:
            ProviderFailure: If the provider call fails or returns no description
        """
        pass


class ProviderFailure(Exception):
    """Embedding or caption generation could not be completed.

    Distinct from an empty search result: the search was never attempted.
    """
    pass


class ProviderTimeoutError(ProviderFailure):
    """Provider call exceeded its deadline"""
    pass


class ProviderRateLimitError(ProviderFailure):
    """Rate limit exceeded"""
    pass


class ProviderAuthError(ProviderFailure):
    """Authentication failed"""
    pass


class ProviderServiceError(ProviderFailure):
    """Provider service unavailable or returned error"""
    pass


class ProviderInvalidResponseError(ProviderFailure):
    """Provider returned invalid/unexpected response"""
    pass
