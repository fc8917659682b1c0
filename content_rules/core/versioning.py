"""Versioned Content - live entity plus an append-only history of snapshots.

Invariants:
    - version starts at 1 and increments by exactly 1 per save_version()
    - len(previous_versions) == version - 1 at all times
    - Snapshots are deep copies: later mutation of the live entity (including
      nested lists such as Article.tags) never reaches a saved snapshot
    - History is never truncated, reordered, or rewritten
    - get_version(n) is 1-indexed; n < 1 or n > len(history) returns None

Design Decisions:
    - copy.deepcopy over a field-level copy: a shallow copy would alias nested
      mutable fields across snapshots
    - Mutation of the live entity is not intercepted; save_version() is the only
      way state enters history
"""

import copy
import logging
from typing import Generic, TypeVar

from content_rules.core.entities import BaseContent

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseContent)


class VersionedContent(Generic[T]):
    """Owns one live entity and its snapshot history."""

    def __init__(self, content: T):
        self.content: T = content
        self._version: int = 1
        self._previous_versions: list[T] = []

    @property
    def version(self) -> int:
        """Current version number; advanced only by save_version()."""
        return self._version

    @property
    def previous_versions(self) -> tuple[T, ...]:
        """Read-only view of saved snapshots, oldest first."""
        return tuple(self._previous_versions)

    def save_version(self) -> None:
        """Snapshot the live entity, then bump the version counter."""
        self._previous_versions.append(copy.deepcopy(self.content))
        self._version += 1
        logger.debug(
            "Saved content snapshot",
            extra={"content_id": self.content.id, "version": self._version},
        )

    def get_version(self, version_number: int) -> T | None:
        """Snapshot saved as version_number (1-indexed), or None if out of range."""
        if version_number < 1 or version_number > len(self._previous_versions):
            return None
        return self._previous_versions[version_number - 1]
