# donation_api/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # required: the app refuses to boot without a connection string
    mongo_uri: str
    mongo_db: str = "donations"
    mongo_collection: str = "donations"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: str = "*"

    # directory holding a prebuilt UI bundle (e.g. `flet build web`)
    static_dir: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def get_settings() -> Settings:
    """Read settings from the environment (and `.env`)."""
    return Settings()
