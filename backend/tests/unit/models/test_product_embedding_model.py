"""Unit tests for catalog model invariants (no database required)"""

import pytest

from shopassist.models import EmbeddingDimensionError, Product, ProductEmbedding
from shopassist.models.product_embedding import EMBEDDING_DIMENSION


class TestProductEmbeddingValidation:
    def test_accepts_configured_dimension(self):
        embedding = ProductEmbedding(
            text_embedding=[0.1] * EMBEDDING_DIMENSION,
            image_embedding=[0.2] * EMBEDDING_DIMENSION,
        )

        assert len(embedding.text_embedding) == 1536
        assert embedding.image_embedding[0] == pytest.approx(0.2)

    @pytest.mark.parametrize("field", ["text_embedding", "image_embedding"])
    def test_rejects_wrong_length(self, field):
        vectors = {"text_embedding": [0.1] * EMBEDDING_DIMENSION, "image_embedding": [0.1] * EMBEDDING_DIMENSION}
        vectors[field] = [0.1] * 768

        with pytest.raises(EmbeddingDimensionError, match=field):
            ProductEmbedding(**vectors)

    def test_rejects_missing_vector(self):
        with pytest.raises(EmbeddingDimensionError):
            ProductEmbedding(text_embedding=[0.1] * EMBEDDING_DIMENSION, image_embedding=None)

    def test_dimension_error_is_value_error(self):
        assert issubclass(EmbeddingDimensionError, ValueError)


class TestIndexes:
    def test_two_hnsw_indexes(self):
        indexes = {index.name: index for index in ProductEmbedding.__table__.indexes}

        assert set(indexes) == {"by_text_embedding", "by_image_embedding"}
        for index in indexes.values():
            assert index.dialect_options["postgresql"]["using"] == "hnsw"

    def test_one_embedding_per_product(self):
        unique = [i for i in Product.__table__.indexes if i.unique]

        assert [list(i.columns.keys()) for i in unique] == [["embedding_id"]]
