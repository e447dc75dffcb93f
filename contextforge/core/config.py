import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__


logger = logging.getLogger(__name__)


DEFAULT_ADDRESS = "http://localhost:8000/"
DEFAULT_USER_AGENT = f"contextforge-client/{__version__}"


class Settings(BaseSettings):
    """Client settings with environment variable support.

    Every field reads from a CONTEXTFORGE_-prefixed variable, e.g.
    CONTEXTFORGE_ADDR and CONTEXTFORGE_TOKEN.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTEXTFORGE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated variables in .env
    )

    addr: str = DEFAULT_ADDRESS
    token: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    # Transport timeout per request; None waits indefinitely
    timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("addr")
    @classmethod
    def _ensure_trailing_slash(
        cls,
        v: str,
    ) -> str:
        if v and not v.endswith("/"):
            return v + "/"
        return v


# Global settings instance
settings = Settings()
