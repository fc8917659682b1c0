"""Content Schemas - tests for boundary payload parsing.

Tests cover:
    - Dict -> payload -> core entity
    - Business-rule violations pass through to core validators
    - Type errors, unknown keys and bad status rejected by pydantic
    - ValidationResultOut serialization
"""

import pytest
from pydantic import ValidationError

from content_rules.core.domain_types import ContentStatus
from content_rules.core.entities import Article, Product
from content_rules.core.validation import ArticleValidator, ProductValidator, ValidationResult
from content_rules.schemas.content import (
    ArticlePayload, ProductPayload, ValidationResultOut,
)


def test_article_payload_builds_entity():
    payload = ArticlePayload.model_validate({
        "id": "a1", "title": "T", "content": "C", "author_id": "user",
        "status": "published", "tags": ["x"],
    })
    article = payload.to_entity()
    assert isinstance(article, Article)
    assert article.status == ContentStatus.PUBLISHED
    assert article.tags == ["x"]
    assert article.tags is not payload.tags


def test_blank_title_is_not_a_schema_error():
    article = ArticlePayload(id="a1", title="", content="C").to_entity()
    assert ArticleValidator().validate(article).errors == ["title required"]


def test_product_payload_missing_price_left_to_validator():
    product = ProductPayload(id="p1", name="N").to_entity()
    assert isinstance(product, Product)
    assert product.price is None
    assert not ProductValidator().validate(product).is_valid


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        ArticlePayload(id="a1", status="deleted")


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        ProductPayload(id="p1", name="N", price=1, colour="red")


def test_non_numeric_price_rejected():
    with pytest.raises(ValidationError):
        ProductPayload(id="p1", name="N", price="cheap")


def test_empty_id_rejected():
    with pytest.raises(ValidationError):
        ArticlePayload(id="")


def test_validation_result_out():
    out = ValidationResultOut.from_result(
        ValidationResult(is_valid=False, errors=["name required"]),
    )
    assert out.model_dump() == {"is_valid": False, "errors": ["name required"]}
