"""Boundary Protocols - contracts between the core and a caller's persistence layer.

Invariants:
    - Core NEVER imports a storage implementation
    - ContentOperations is what an external store provides per entity type

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous signatures: the core has no suspension points
"""

from typing import Protocol, TypeVar

from content_rules.core.domain_types import ContentId
from content_rules.core.entities import BaseContent

T = TypeVar("T", bound=BaseContent)


class ContentOperations(Protocol[T]):
    """Create/read/update/delete contract for one content type."""
    def create(self, content: T) -> bool: ...
    def read(self, content_id: ContentId) -> T | None: ...
    def update(self, content_id: ContentId, content: T) -> bool: ...
    def delete(self, content_id: ContentId) -> bool: ...
