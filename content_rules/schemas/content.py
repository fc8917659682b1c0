"""Content Schemas - Pydantic models turning untrusted dicts into core entities.

Invariants:
    - Payloads check types only; blank titles or non-positive prices pass through
      so core validators report them as ValidationResult errors
    - to_entity() returns a fresh core dataclass, never shares lists with the payload
    - status accepts only ContentStatus values

Design Decisions:
    - Separate from core/entities: schemas are boundary contracts, entities are domain shapes
    - extra="forbid": unknown keys are a caller bug, not data to drop silently
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from content_rules.core.domain_types import ContentId, ContentStatus
from content_rules.core.entities import Article, Product
from content_rules.core.validation import ValidationResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContentPayload(BaseModel):
    """Lifecycle fields shared by every content payload."""
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    published_at: datetime | None = None
    status: ContentStatus = ContentStatus.DRAFT


class ArticlePayload(ContentPayload):
    title: str | None = None
    content: str | None = None
    author_id: str = ""
    tags: list[str] | None = None

    def to_entity(self) -> Article:
        return Article(
            id=ContentId(self.id),
            created_at=self.created_at,
            updated_at=self.updated_at,
            published_at=self.published_at,
            status=self.status,
            title=self.title,
            content=self.content,
            author_id=self.author_id,
            tags=list(self.tags) if self.tags is not None else None,
        )


class ProductPayload(ContentPayload):
    name: str | None = None
    description: str = ""
    price: float | None = None

    def to_entity(self) -> Product:
        return Product(
            id=ContentId(self.id),
            created_at=self.created_at,
            updated_at=self.updated_at,
            published_at=self.published_at,
            status=self.status,
            name=self.name,
            description=self.description,
            price=self.price,
        )


class ValidationResultOut(BaseModel):
    """Serializable form of a core ValidationResult."""
    is_valid: bool
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultOut":
        return cls(is_valid=result.is_valid, errors=list(result.errors))
