# heartcheck/core/config.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service account JSON for the Firebase Admin SDK (local path)
    FIREBASE_CREDENTIALS: str = "heartcheck/core/firebase_key.json"

    # Records live under artifacts/{APP_ID}/users/{uid}/healthRecords
    APP_ID: str = "default-app-id"

    # Dashboard page size; "load more" grows the window by the same amount
    RECORDS_PAGE_SIZE: int = 10

    # Pretty-printed JSON debug events (see services/logger.py)
    AI_DEBUG_MODE: bool = False
    LOG_LEVEL: str = "INFO"

    # If you want to read from a .env file, keep this:
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
