from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

IGDB_URL = "https://api-v3.igdb.com/"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    igdb_api_key: Optional[str] = Field(default=None, repr=False)
    igdb_base_url: str = IGDB_URL
    igdb_timeout_s: float = 30.0

    def require_api_key(self) -> str:
        if not self.igdb_api_key:
            raise RuntimeError(
                "IGDB_API_KEY is not set. "
                "Set it in the environment or .env file."
            )
        return self.igdb_api_key


settings = Settings()
