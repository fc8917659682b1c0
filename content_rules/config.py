"""Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - locale is always a Locale value after validation

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - CONTENT_RULES_ prefix keeps variables from colliding with the host application
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from content_rules.core.access_control import (
    ArticleAccessControl, build_article_access_control,
)
from content_rules.core.domain_types import CURRENT_USER_ID, Locale
from content_rules.core.validation import CompositeValidator, default_registry
from content_rules.infrastructure.observability import setup_logging


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_RULES_", env_file=".env", case_sensitive=False,
    )

    # Identity compared by editor ownership rules
    current_user_id: str = CURRENT_USER_ID

    # Validation messages
    locale: Locale = Locale.EN

    @field_validator("locale", mode="before")
    @classmethod
    def normalize_locale(cls, v: object) -> object:
        """Accept 'EN' / ' uk ' as well as the canonical lowercase codes."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def validator_registry_from_settings(settings: Settings | None = None) -> CompositeValidator:
    settings = settings or get_settings()
    return default_registry(settings.locale)


def article_access_control_from_settings(
    settings: Settings | None = None,
) -> ArticleAccessControl:
    settings = settings or get_settings()
    return build_article_access_control(settings.current_user_id)


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Handler:
    """Configure root logging from CONTENT_RULES_LOG_LEVEL / CONTENT_RULES_LOG_FORMAT."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
