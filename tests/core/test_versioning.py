"""Versioned Content - tests for snapshot history and version counter.

Tests cover:
    - Fresh wrapper starts at version 1 with empty history
    - Three saves with mutations in between produce three distinct snapshots
    - get_version is 1-indexed and returns None outside the saved range
    - Snapshots are deep copies (nested tag lists not aliased)
    - previous_versions is a read-only view
    - version is read-only and always equals len(previous_versions) + 1
"""

import pytest

from content_rules.core.domain_types import ContentStatus
from content_rules.core.entities import Article, Product
from content_rules.core.versioning import VersionedContent


def _article() -> Article:
    return Article(id="a1", title="v1", content="body", author_id="user", tags=["news"])


def test_new_wrapper_starts_at_version_one():
    versioned = VersionedContent(_article())
    assert versioned.version == 1
    assert versioned.previous_versions == ()
    assert versioned.get_version(1) is None


def test_three_saves_capture_state_at_each_save():
    article = _article()
    versioned = VersionedContent(article)

    versioned.save_version()
    article.title = "v2"
    versioned.save_version()
    article.title = "v3"
    article.status = ContentStatus.PUBLISHED
    versioned.save_version()
    article.title = "live"

    assert versioned.version == 4
    first, second, third = (versioned.get_version(n) for n in (1, 2, 3))
    assert first.title == "v1"
    assert second.title == "v2"
    assert third.title == "v3"
    assert third.status == ContentStatus.PUBLISHED
    assert first.status == ContentStatus.DRAFT
    assert len({id(first), id(second), id(third)}) == 3


def test_snapshots_are_independent_of_live_entity():
    article = _article()
    versioned = VersionedContent(article)
    versioned.save_version()
    snapshot = versioned.get_version(1)
    assert snapshot is not article
    assert snapshot == article

    article.content = "edited"
    assert snapshot.content == "body"


def test_nested_tags_are_not_aliased_across_snapshots():
    article = _article()
    versioned = VersionedContent(article)
    versioned.save_version()
    article.tags.append("breaking")
    versioned.save_version()

    assert versioned.get_version(1).tags == ["news"]
    assert versioned.get_version(2).tags == ["news", "breaking"]
    assert versioned.get_version(1).tags is not versioned.get_version(2).tags


def test_out_of_range_versions_are_not_found():
    versioned = VersionedContent(_article())
    versioned.save_version()
    assert versioned.get_version(0) is None
    assert versioned.get_version(99) is None
    assert versioned.get_version(-1) is None
    assert versioned.get_version(1) is not None


def test_later_saves_do_not_mutate_earlier_snapshots():
    product = Product(id="p1", name="Lamp", price=10.0)
    versioned = VersionedContent(product)
    versioned.save_version()
    product.price = 12.5
    versioned.save_version()
    assert versioned.get_version(1).price == 10.0
    assert versioned.get_version(2).price == 12.5


def test_previous_versions_view_is_read_only_copy():
    versioned = VersionedContent(_article())
    versioned.save_version()
    view = versioned.previous_versions
    assert isinstance(view, tuple)
    assert len(view) == versioned.version - 1


def test_version_cannot_be_assigned():
    versioned = VersionedContent(_article())
    versioned.save_version()
    with pytest.raises(AttributeError):
        versioned.version = 7
    assert versioned.version == 2
    assert len(versioned.previous_versions) == versioned.version - 1
