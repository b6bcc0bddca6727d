"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./history.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class HistorySettings(BaseModel):
    # Wall-clock zone used when stamping new records.
    timezone: str = "America/Sao_Paulo"
    display_timezone: Optional[str] = None


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_output: bool = True
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CorsSettings(BaseModel):
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Loyalty History Service"
    api_prefix: str = ""
    docs_url: Optional[str] = "/"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    history: HistorySettings = HistorySettings()
    logging: LoggingSettings = LoggingSettings()
    cors: CorsSettings = CorsSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def timezone(self) -> str:
        return self.history.timezone

    @property
    def display_timezone(self) -> str:
        return self.history.display_timezone or self.history.timezone


@lru_cache()
def get_settings() -> Settings:
    return Settings()
