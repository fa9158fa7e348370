from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DB_URL: str | None = None      # full SQLAlchemy URL, e.g. postgresql+psycopg://...
    DB_PATH: str = "gainz.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Store behaviour
    ENFORCE_SINGLE_ACTIVE_SESSION: bool = False
    SEED_PREVIEW_DATA: bool = False

    ALLOW_ORIGINS: str = "*"
    API_VERSION: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return f"sqlite:///{self.DB_PATH}"

@lru_cache
def get_settings() -> Settings:
    return Settings()
