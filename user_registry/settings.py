from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    model_config = SettingsConfigDict(
        env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )

    # Env vars:
    # - USER_REGISTRY_HOST / USER_REGISTRY_PORT (bind address, default localhost:8080)
    # - USER_REGISTRY_LOG_LEVEL (optional)
    # - USER_REGISTRY_SEED (optional; "false" starts with an empty registry)
    host: str = Field(default="localhost", validation_alias="USER_REGISTRY_HOST")
    port: int = Field(default=8080, validation_alias="USER_REGISTRY_PORT")
    log_level: str = Field(default="INFO", validation_alias="USER_REGISTRY_LOG_LEVEL")
    seed: bool = Field(default=True, validation_alias="USER_REGISTRY_SEED")

    def model_post_init(self, __context):  # type: ignore[override]
        self.log_level = (self.log_level or "INFO").upper().strip()


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). FastAPI
    dependencies and tests can override/monkeypatch this function.
    """
    return Settings()
