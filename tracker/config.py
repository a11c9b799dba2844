# tracker/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite:///tracker.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
