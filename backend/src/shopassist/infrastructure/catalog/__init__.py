"""Catalog Store adapters"""

from .pgvector_catalog_store import PgVectorCatalogStore

__all__ = ["PgVectorCatalogStore"]
