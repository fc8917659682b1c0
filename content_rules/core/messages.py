"""Validation Messages - locale-keyed catalogue of validator error strings.

Invariants:
    - All strings are pure data (no IO)
    - Every MessageKey has an entry for every Locale
    - English is the default catalogue

Design Decisions:
    - Central catalogue over inline literals: validators stay locale-agnostic
    - Adding a locale means adding one dict; validators need no change
"""

from enum import Enum

from content_rules.core.domain_types import Locale


class MessageKey(str, Enum):
    TITLE_REQUIRED = "title_required"
    CONTENT_REQUIRED = "content_required"
    NAME_REQUIRED = "name_required"
    PRICE_NOT_POSITIVE = "price_not_positive"


_MESSAGES: dict[Locale, dict[MessageKey, str]] = {
    Locale.EN: {
        MessageKey.TITLE_REQUIRED: "title required",
        MessageKey.CONTENT_REQUIRED: "content required",
        MessageKey.NAME_REQUIRED: "name required",
        MessageKey.PRICE_NOT_POSITIVE: "price must exceed 0",
    },
    Locale.UK: {
        MessageKey.TITLE_REQUIRED: "Заголовок обов’язковий.",
        MessageKey.CONTENT_REQUIRED: "Контент обов’язковий.",
        MessageKey.NAME_REQUIRED: "Назва обов’язкова.",
        MessageKey.PRICE_NOT_POSITIVE: "Ціна повинна бути більшою за 0.",
    },
}


def get_message(key: MessageKey, locale: Locale = Locale.EN) -> str:
    """Look up a validation message. Unknown locale strings raise ValueError."""
    return _MESSAGES[Locale(locale)][key]
