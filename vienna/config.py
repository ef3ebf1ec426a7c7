"""Application configuration via pydantic-settings."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT = "public"
DEFAULT_MAX_AGE = 3600


class ServerConfig(BaseModel):
    """Options of a single static application. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: str = DEFAULT_ROOT
    max_age: int = Field(default=DEFAULT_MAX_AGE, ge=0)

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.max_age}"

    def updated(self, **options) -> "ServerConfig":
        """Copy with ``options`` overriding, validated like a new config."""
        return ServerConfig(**{**self.model_dump(), **options})


# Process-wide settings, read from VIENNA_* variables or a .env file.
# Only create_app() without arguments and the command line use them.
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VIENNA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Static site
    ROOT: str = DEFAULT_ROOT
    MAX_AGE: int = DEFAULT_MAX_AGE

    # Runner (only read by the command line)
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    def server_config(self) -> ServerConfig:
        return ServerConfig(root=self.ROOT, max_age=self.MAX_AGE)
