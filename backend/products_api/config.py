from typing import List, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionSettings(BaseModel):
    connection_string: str = "sqlite:///./products.db"


class DataSettings(BaseModel):
    default_connection: ConnectionSettings = ConnectionSettings()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # DATA__DEFAULT_CONNECTION__CONNECTION_STRING
    data: DataSettings = DataSettings()
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    RESET_DB: bool = False
    MIGRATION_LOCK_PATH: Optional[str] = None
    MIGRATION_LOCK_TIMEOUT_SECONDS: int = 10

    @property
    def database_url(self) -> str:
        return self.data.default_connection.connection_string


settings = Settings()
