"""Application settings loaded from environment variables."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class ConfigError(Exception):
    """Raised when the environment holds an unusable setting."""


class Settings(BaseSettings):
    # Listener
    host: str = "0.0.0.0"
    port: int = Field(default=2593, ge=1, le=65535)

    # Greeting word, e.g. "Hello" or "Goodbye"
    greeting: str = "Hello"

    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_ignore_empty = True
        extra = "ignore"
        frozen = True

    @field_validator("greeting")
    @classmethod
    def _greeting_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("greeting must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


def load_settings(**overrides) -> Settings:
    """Read settings from the environment, failing on invalid values.

    A present but malformed ``PORT`` is an error rather than a silent
    fallback to the default.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
