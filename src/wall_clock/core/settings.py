# src/wall_clock/core/settings.py
"""Library settings.

Values are loaded from environment variables and, when present, from a
``.env`` file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Range-check parsed fields and require a six-digit fraction. Disable to
    # accept any magnitude the integer parse allows.
    strict_parsing: bool = Field(default=True, alias="WALL_CLOCK_STRICT_PARSING")

    model_config = SettingsConfigDict(
        env_file=".env",
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()
