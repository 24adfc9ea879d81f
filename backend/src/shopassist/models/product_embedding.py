"""ProductEmbedding Model - Text and image vectors for product similarity search."""

from uuid import uuid4

from pgvector.sqlalchemy import Vector
from sqlalchemy import Column, Index, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import validates

from ..config import settings
from .base import Base

EMBEDDING_DIMENSION = settings.EMBEDDING_DIMENSION


class EmbeddingDimensionError(ValueError):
    """Vector is missing or does not match the configured dimension."""
    pass


class ProductEmbedding(Base):
    """Embedding record owned 1:1 by a product.

    Holds two independently indexed vectors over the same record set:
    - text_embedding: embedding of the product name, brand and description
    - image_embedding: embedding of a caption generated from the product image

    Indexes:
        - HNSW(text_embedding, vector_cosine_ops): "by_text_embedding"
        - HNSW(image_embedding, vector_cosine_ops): "by_image_embedding"

    Example Query (Top 30 by text similarity):
        SELECT id, 1 - (text_embedding <=> :query_vector) AS similarity
        FROM product_embedding
        ORDER BY text_embedding <=> :query_vector
        LIMIT 30
    """

    __tablename__ = "product_embedding"

    id = Column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        server_default=text("gen_random_uuid()"),
    )

    # Dimension is enforced both by the column type and by the validators below
    text_embedding = Column(Vector(EMBEDDING_DIMENSION), nullable=False)
    image_embedding = Column(Vector(EMBEDDING_DIMENSION), nullable=False)

    __table_args__ = (
        Index(
            "by_text_embedding",
            "text_embedding",
            postgresql_using="hnsw",
            postgresql_with={"m": 16, "ef_construction": 64},
            postgresql_ops={"text_embedding": "vector_cosine_ops"},
        ),
        Index(
            "by_image_embedding",
            "image_embedding",
            postgresql_using="hnsw",
            postgresql_with={"m": 16, "ef_construction": 64},
            postgresql_ops={"image_embedding": "vector_cosine_ops"},
        ),
    )

    @validates("text_embedding", "image_embedding")
    def validate_vector(self, key, value):
        """Reject missing or wrong-length vectors before they reach the index."""
        if value is None:
            raise EmbeddingDimensionError(f"{key} is required")
        vector = [float(x) for x in value]
        if len(vector) != EMBEDDING_DIMENSION:
            raise EmbeddingDimensionError(
                f"{key} has dimension {len(vector)}, expected {EMBEDDING_DIMENSION}"
            )
        return vector

    def __repr__(self) -> str:
        return f"<ProductEmbedding(id={self.id})>"
