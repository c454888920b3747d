"""
Centralized configuration for the Argue backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, GROQ_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Argue Against the Machine"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Persistence
    storage_backend: Literal["supabase", "memory"] = "supabase"
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # Direct Postgres URL, used only by run_migrations.py

    # LLM provider
    llm_provider: str = "groq"
    llm_api_base: str = ""
    llm_request_timeout: float = 60.0
    groq_api_key: str = ""
    openai_api_key: str = ""
    openrouter_api_key: str = ""

    # Debate rules
    max_turns: int = 3
    default_difficulty: str = "associate"
    default_model: str = "llama-3.3-70b-versatile"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
