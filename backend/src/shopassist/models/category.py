"""Category SQLAlchemy model"""

from uuid import uuid4

from sqlalchemy import Column, Text, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import text

from .base import Base


class Category(Base):
    """Product category.

    Name and slug are unique within the catalog. Categories are seeded once
    and only change through administrative edits.
    """
    __tablename__ = "category"
    __table_args__ = (
        Index("ix_category_slug", "slug", unique=True),
        Index("ix_category_name", "name", unique=True),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4, server_default=text("gen_random_uuid()"))
    name = Column(Text, nullable=False)
    slug = Column(Text, nullable=False)
    description = Column(Text, nullable=False, server_default="")

    products = relationship("Product", back_populates="category")
