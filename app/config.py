"""Application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    app_name: str = "Resume Optimizer Backend"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 5000

    # CORS Settings (the add-on runs inside the Adobe Express iframe)
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: List[str] = ["Content-Type", "Authorization"]

    # Upload / enhancement limits
    max_file_size_mb: int = 50
    enhance_resume_max_chars: int = 2500
    enhance_job_description_max_chars: int = 1500

    # OpenAI key is only reported by the health check for now
    openai_api_key: str | None = None

    # Caching
    cache_ttl: int = 300  # seconds

    # Redis Cache
    redis_url: str | None = None
    redis_tls: bool = False

    class Config:
        env_prefix = "RESUME_OPTIMIZER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
