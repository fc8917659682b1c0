"""Access Control Tables - per-role, per-operation authorization predicates.

Invariants:
    - Every table covers all Role x Operation pairs (checked when the table is declared)
    - Tables are built once and exposed read-only (MappingProxyType)
    - Predicates are PURE: (entity) -> bool, no IO, no mutation
    - A role or operation outside the closed enumeration raises AccessRuleNotFoundError

Design Decisions:
    - Capability table as data: predicates stored as values, not if/else chains
    - Product table declared independently against Product fields; it shares no
      predicates with the article table
    - Explicit error over deny-by-default for unknown keys: a typo in a role name
      surfaces immediately instead of looking like a denial
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from content_rules.core.domain_types import (
    CURRENT_USER_ID, ContentStatus, ContentType, Operation, Role,
)
from content_rules.core.entities import Article, Product
from content_rules.core.errors import (
    AccessRuleNotFoundError, ErrorContext, PermissionDeniedError,
    UnknownContentTypeError,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]
AccessControl = Mapping[Role, Mapping[Operation, Predicate]]
ArticleAccessControl = Mapping[Role, Mapping[Operation, Callable[[Article], bool]]]
ProductAccessControl = Mapping[Role, Mapping[Operation, Callable[[Product], bool]]]


@dataclass(frozen=True)
class Permission:
    """Resolved capabilities of one role over one entity."""
    create: bool
    read: bool
    update: bool
    delete: bool


def _always(_content: object) -> bool:
    return True


def _never(_content: object) -> bool:
    return False


def _freeze(table: dict[Role, dict[Operation, Predicate]]) -> AccessControl:
    """Check exhaustiveness and wrap every level in a read-only proxy."""
    missing = [
        f"{role.value}.{op.value}"
        for role in Role for op in Operation
        if op not in table.get(role, {})
    ]
    if missing:
        raise ValueError(f"Access table is missing rules: {', '.join(missing)}")
    return MappingProxyType({
        role: MappingProxyType(dict(rules)) for role, rules in table.items()
    })


# ─── Declared Tables ─────────────────────────────────────────────

def build_article_access_control(
    current_user_id: str = CURRENT_USER_ID,
) -> ArticleAccessControl:
    """Article rules. Editors may update only articles they authored."""

    def _is_own_article(article: Article) -> bool:
        return article.author_id == current_user_id

    def _is_published(article: Article) -> bool:
        return article.status == ContentStatus.PUBLISHED

    return _freeze({
        Role.ADMIN: {
            Operation.CREATE: _always,
            Operation.READ: _always,
            Operation.UPDATE: _always,
            Operation.DELETE: _always,
        },
        Role.EDITOR: {
            Operation.CREATE: _always,
            Operation.READ: _always,
            Operation.UPDATE: _is_own_article,
            Operation.DELETE: _never,
        },
        Role.VIEWER: {
            Operation.CREATE: _never,
            Operation.READ: _is_published,
            Operation.UPDATE: _never,
            Operation.DELETE: _never,
        },
    })


def _build_product_access_control() -> ProductAccessControl:
    return _freeze({
        Role.ADMIN: {
            Operation.CREATE: _always,
            Operation.READ: _always,
            Operation.UPDATE: _always,
            Operation.DELETE: _always,
        },
        Role.EDITOR: {
            Operation.CREATE: _always,
            Operation.READ: _always,
            Operation.UPDATE: _always,
            Operation.DELETE: _never,
        },
        Role.VIEWER: {
            Operation.CREATE: _never,
            Operation.READ: _always,
            Operation.UPDATE: _never,
            Operation.DELETE: _never,
        },
    })


ARTICLE_ACCESS_CONTROL: ArticleAccessControl = build_article_access_control()
PRODUCT_ACCESS_CONTROL: ProductAccessControl = _build_product_access_control()

_TABLES_BY_TYPE: Mapping[ContentType, AccessControl] = MappingProxyType({
    ContentType.ARTICLE: ARTICLE_ACCESS_CONTROL,
    ContentType.PRODUCT: PRODUCT_ACCESS_CONTROL,
})


# ─── Lookup ──────────────────────────────────────────────────────

def access_table_for(content_type: ContentType | str) -> AccessControl:
    """Return the declared table for a content type tag."""
    try:
        return _TABLES_BY_TYPE[ContentType(content_type)]
    except ValueError:
        raise UnknownContentTypeError(content_type) from None


def get_predicate(
    table: AccessControl, role: Role | str, operation: Operation | str,
) -> Predicate:
    """Look up the predicate for (role, operation).

    Raises AccessRuleNotFoundError when either key is outside the enumeration
    or the table has no rule for it.
    """
    try:
        return table[Role(role)][Operation(operation)]
    except (ValueError, KeyError):
        raise AccessRuleNotFoundError(role, operation) from None


def is_authorized(
    table: AccessControl, role: Role | str, operation: Operation | str, content: Any,
) -> bool:
    """Apply the (role, operation) predicate to one entity."""
    decision = bool(get_predicate(table, role, operation)(content))
    logger.debug(
        "Access %s", "granted" if decision else "denied",
        extra={
            "role": Role(role).value,
            "operation": Operation(operation).value,
            "content_id": getattr(content, "id", None),
        },
    )
    return decision


def permissions_for(table: AccessControl, role: Role | str, content: Any) -> Permission:
    """Resolve all four operations for one role over one entity."""
    return Permission(
        create=is_authorized(table, role, Operation.CREATE, content),
        read=is_authorized(table, role, Operation.READ, content),
        update=is_authorized(table, role, Operation.UPDATE, content),
        delete=is_authorized(table, role, Operation.DELETE, content),
    )


def require_authorized(
    table: AccessControl, role: Role | str, operation: Operation | str, content: Any,
) -> None:
    """Raise PermissionDeniedError unless the predicate allows the operation."""
    if not is_authorized(table, role, operation, content):
        raise PermissionDeniedError(
            role, operation,
            ErrorContext(content_id=getattr(content, "id", None)),
        )
