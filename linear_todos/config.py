"""Application settings loaded from environment variables.

All settings use the ``LINEAR_TODOS_`` prefix, e.g. ``LINEAR_TODOS_TODO_PATTERNS``.
The scanning engine never reads these implicitly: callers pass the values they
need (marker keywords, context radius) into ``TodoIndex`` explicitly.
"""

import json
import logging
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .engine.scanning.constants import DEFAULT_TODO_PATTERNS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Runtime configuration for the TODO index and its HTTP service."""

    model_config = SettingsConfigDict(
        env_prefix="LINEAR_TODOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scanning
    todo_patterns: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_TODO_PATTERNS),
        description="Ordered marker keywords to detect",
    )
    context_radius: int = Field(default=2, ge=0, description="Lines of context around a TODO")

    # Issue tracker
    team_id: str | None = Field(default=None, description="Default team for new issues")
    max_title_length: int = Field(default=80, ge=20, description="Max generated issue title")

    # Server
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_allowed_origins: str = "*"
    max_pending_links: int = Field(
        default=1000, ge=1, description="Unconfirmed link edits kept before the oldest is evicted"
    )

    @field_validator("todo_patterns", mode="before")
    @classmethod
    def _split_patterns(cls, value):
        """Accept a JSON list or a comma-separated string.

        Malformed values degrade to fewer (or no) keywords instead of failing
        startup: bad JSON yields [] and non-string entries are dropped.
        """
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped.startswith("["):
                return [part.strip() for part in stripped.split(",") if part.strip()]
            try:
                value = json.loads(stripped)
            except json.JSONDecodeError as e:
                logger.warning(f"Ignoring malformed todo_patterns {stripped!r}: {e}")
                return []
        if not isinstance(value, (list, tuple)):
            logger.warning(f"Ignoring todo_patterns of type {type(value).__name__}")
            return []
        patterns = [p for p in value if isinstance(p, str)]
        if len(patterns) != len(value):
            logger.warning(f"Dropped {len(value) - len(patterns)} non-string todo_patterns")
        return patterns

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()
