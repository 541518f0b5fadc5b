"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Document store
    store_backend: Literal["json", "mongo"] = "json"
    db_path: str = "./db.json"

    # MongoDB (only used when store_backend == "mongo")
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "items_db"

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60

    # Passwords are stored as submitted unless a hashing scheme is configured
    password_schemes: list[str] = ["plaintext"]

    # HTTP
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["http://localhost:5173"]

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
