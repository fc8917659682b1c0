"""Entity Model - passive data shapes for content items.

Invariants:
    - Entities are plain mutable dataclasses: no IO, no validation on construction
    - Type-specific fields default to empty/absent so validators can observe missing input
    - status may be set to any ContentStatus at any time (no transition guards)

Design Decisions:
    - Dataclass inheritance for BaseContent -> Article/Product: shared lifecycle fields
    - Identifiers and timestamps are supplied by the caller; defaults exist only for convenience
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from content_rules.core.domain_types import ContentId, ContentStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class BaseContent:
    """Lifecycle fields shared by every content item."""

    id: ContentId = ContentId("")
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    published_at: datetime | None = None
    status: ContentStatus = ContentStatus.DRAFT


@dataclass
class Article(BaseContent):
    title: str | None = ""
    content: str | None = ""
    author_id: str = ""
    tags: list[str] | None = None


@dataclass
class Product(BaseContent):
    name: str | None = ""
    description: str = ""
    price: float | None = None
