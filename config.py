"""Configuration settings for the BPM contracts layer."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the contracts layer.

    Settings can be overridden via environment variables with BPM_ prefix.
    Example: BPM_JSON_INDENT=2
    """

    # Serialization
    json_indent: Optional[int] = Field(
        default=None,
        ge=0,
        description="Default indent for encoded JSON; None writes compact JSON"
    )

    # Login
    bearer_token_type: str = Field(
        default="Bearer",
        description="Default token type on login responses"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI"
    )

    model_config = {
        "env_prefix": "BPM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Create singleton instance
settings = Settings()
