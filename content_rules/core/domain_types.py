"""Domain Types - closed enumerations and identity types shared by the core.

Invariants:
    - Role, Operation, ContentType, ContentStatus are closed sets - tables keyed
      by them are exhaustive
    - All enums are str Enums: members compare equal to their raw string value
    - CURRENT_USER_ID is the identity editor ownership rules compare against

Design Decisions:
    - NewType for ContentId: zero runtime cost, opaque to callers
    - str Enums: callers may pass "editor" or Role.EDITOR interchangeably
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ContentId = NewType("ContentId", str)

CURRENT_USER_ID: str = "user"


# ─── Enums ───────────────────────────────────────────────────────

class ContentStatus(str, Enum):
    """Lifecycle status - transitions between values are not guarded."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Role(str, Enum):
    """Actor categories used to look up authorization predicates."""
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class Operation(str, Enum):
    """The four content operations an access table covers."""
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class ContentType(str, Enum):
    """Entity type tags - registry and access-table keys."""
    ARTICLE = "article"
    PRODUCT = "product"


class Locale(str, Enum):
    """Locales with a validation message catalogue."""
    EN = "en"
    UK = "uk"
