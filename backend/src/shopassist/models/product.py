"""Product SQLAlchemy model"""

from uuid import uuid4

from sqlalchemy import Column, Text, ForeignKey, Numeric, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import text

from .base import Base


class Product(Base):
    """Product in the shop catalog.

    Each product belongs to one category and owns exactly one
    ProductEmbedding, created in the same transaction as the product.
    """
    __tablename__ = "product"
    __table_args__ = (
        Index("ix_product_category_id", "category_id"),
        Index("ix_product_embedding_id", "embedding_id", unique=True),
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4, server_default=text("gen_random_uuid()"))
    name = Column(Text, nullable=False)
    brand = Column(Text, nullable=False)
    description = Column(Text, nullable=False, server_default="")
    price = Column(Numeric(precision=10, scale=2, asdecimal=False), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("category.id", ondelete="RESTRICT"), nullable=False)
    image_url = Column(Text, nullable=False)
    embedding_id = Column(
        UUID(as_uuid=True),
        ForeignKey("product_embedding.id", ondelete="RESTRICT"),
        nullable=False,
    )
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    # Relationships
    category = relationship("Category", back_populates="products")
    embedding = relationship("ProductEmbedding")
