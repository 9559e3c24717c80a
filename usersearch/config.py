"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The access token comes from the environment (never hardcoded)
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - order_field_error_style selects the wire wording for unknown order fields;
      the envelope code is UNKNOWN_ORDER_FIELD for both
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SYMBOLIC_ORDER_FIELD_MESSAGE = "ErrorBadOrderField"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    access_token: str = ""

    # Records
    dataset_path: str = "dataset.xml"

    # Wire format
    order_field_error_style: Literal["sentence", "symbolic"] = "sentence"

    # Client defaults
    client_timeout_seconds: float = 1.0
    client_max_limit: int = 25

    @field_validator("client_max_limit")
    @classmethod
    def check_max_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("client_max_limit must be > 0")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def unknown_order_field_message(self) -> str | None:
        """Override text for UnknownOrderFieldError, None for the default sentence."""
        if self.order_field_error_style == "symbolic":
            return SYMBOLIC_ORDER_FIELD_MESSAGE
        return None


@lru_cache
def get_settings() -> Settings:
    return Settings()
