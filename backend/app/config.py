import os
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Database
    DB_TYPE: str = "sqlite"
    DATABASE_URL: Optional[str] = None
    SEED_DATA: bool = True

    # Sessions
    TOKEN_TTL_HOURS: int = Field(24, gt=0, description="Bearer token lifetime in hours")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    @property
    def get_database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_TYPE == "sqlite":
            db_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "films.db")
            os.makedirs(os.path.dirname(db_path), exist_ok=True)
            return f"sqlite:///{db_path}"
        raise ValueError("DATABASE_URL must be set for non-SQLite databases")


settings = Settings()
