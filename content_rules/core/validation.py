"""Validation - per-type field checks and a registry dispatching by type tag.

Invariants:
    - Validators are PURE: return a ValidationResult, never raise on bad data
    - Check order is fixed (title/name first, then content/price) and fixes message order
    - is_valid is True iff errors is empty
    - CompositeValidator: last registration for a key wins; unregistered key -> valid

Design Decisions:
    - Protocol over ABC for Validator: structural subtyping, any object with validate() fits
    - Registry keys stored as plain str: log extras and stored keys never carry
      enum members, whichever form the caller registered with
    - Permissive default on miss is an explicit branch, logged at DEBUG so callers
      relying on it can see it happen
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from content_rules.core.domain_types import ContentType, Locale
from content_rules.core.entities import Article, Product
from content_rules.core.messages import MessageKey, get_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)


class Validator(Protocol):
    """Anything that turns one entity into a ValidationResult."""
    def validate(self, data: Any) -> ValidationResult: ...


def _is_blank(value: str | None) -> bool:
    return not value or value.strip() == ""


def _result(errors: list[str]) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=errors)


class ArticleValidator:
    """Title and content must be present and non-blank."""

    def __init__(self, locale: Locale | str = Locale.EN):
        self.locale = Locale(locale)

    def validate(self, data: Article) -> ValidationResult:
        errors: list[str] = []
        if _is_blank(data.title):
            errors.append(get_message(MessageKey.TITLE_REQUIRED, self.locale))
        if _is_blank(data.content):
            errors.append(get_message(MessageKey.CONTENT_REQUIRED, self.locale))
        return _result(errors)


class ProductValidator:
    """Name must be non-blank; price must be present and positive."""

    def __init__(self, locale: Locale | str = Locale.EN):
        self.locale = Locale(locale)

    def validate(self, data: Product) -> ValidationResult:
        errors: list[str] = []
        if _is_blank(data.name):
            errors.append(get_message(MessageKey.NAME_REQUIRED, self.locale))
        if data.price is None or data.price <= 0:
            errors.append(get_message(MessageKey.PRICE_NOT_POSITIVE, self.locale))
        return _result(errors)


def _registry_key(type_name: ContentType | str) -> str:
    return type_name.value if isinstance(type_name, Enum) else type_name


class CompositeValidator:
    """Maps type tags to validators and dispatches validate() by tag."""

    def __init__(self) -> None:
        self._validators: dict[str, Validator] = {}

    def register(self, type_name: ContentType | str, validator: Validator) -> None:
        """Register a validator. An existing registration for the key is replaced."""
        self._validators[_registry_key(type_name)] = validator

    def is_registered(self, type_name: ContentType | str) -> bool:
        return _registry_key(type_name) in self._validators

    def validate(self, type_name: ContentType | str, data: Any) -> ValidationResult:
        """Validate with the registered validator.

        No validator for the key is NOT an error: the result is valid with no
        errors. Callers that need strictness should check is_registered() first.
        """
        key = _registry_key(type_name)
        validator = self._validators.get(key)
        if validator is None:
            logger.debug(
                "No validator registered, treating as valid",
                extra={"content_type": key},
            )
            return ValidationResult(is_valid=True)
        result = validator.validate(data)
        if not result.is_valid:
            logger.info(
                "Validation failed: %s", "; ".join(result.errors),
                extra={"content_type": key, "content_id": getattr(data, "id", None)},
            )
        return result


def default_registry(locale: Locale | str = Locale.EN) -> CompositeValidator:
    """Registry with the article and product validators registered."""
    registry = CompositeValidator()
    registry.register(ContentType.ARTICLE, ArticleValidator(locale))
    registry.register(ContentType.PRODUCT, ProductValidator(locale))
    return registry
