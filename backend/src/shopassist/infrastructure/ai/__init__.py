"""AI provider adapters"""

from .openai_embeddings import OpenAIEmbeddingAdapter

__all__ = ["OpenAIEmbeddingAdapter"]
