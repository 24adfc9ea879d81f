"""Catalog ingestion (seeding products with their embeddings)."""

from .ingest_service import CatalogIngestService, ProductDraft, slugify

__all__ = ["CatalogIngestService", "ProductDraft", "slugify"]
