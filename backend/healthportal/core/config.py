import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Runtime settings for the portal API."""

    APP_TITLE: str = os.getenv("APP_TITLE", "MyMedi Healthcare Portal")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Frontend origins allowed to call the API
    CORS_ORIGINS: List[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]

    # Store
    SEED_SAMPLE_DATA: bool = True
    PASSWORD_HASH_METHOD: str = "scrypt"

    # Assistant pacing hint in milliseconds, 0 disables it
    TYPING_DELAY_MS: int = 800

    # Document uploads
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    ALLOWED_UPLOAD_TYPES: List[str] = ["application/pdf", "image/jpeg", "image/png"]

    class Config:
        case_sensitive = True


settings = Settings()
