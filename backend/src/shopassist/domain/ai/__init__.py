"""AI domain layer - Ports and errors for embedding/caption providers"""

from .ports import (
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

__all__ = [
    "EmbeddingProviderPort",
    "EmbeddingResult",
    "ImageDescription",
    "ProviderFailure",
    "ProviderTimeoutError",
    "ProviderRateLimitError",
    "ProviderAuthError",
    "ProviderServiceError",
    "ProviderInvalidResponseError",
]
