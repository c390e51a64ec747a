"""
Character Language Model Service Configuration
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Service =====
    SERVICE_NAME: str = Field(default="charlm-service", env="SERVICE_NAME")  # type: ignore
    SERVICE_VERSION: str = Field(default="1.0.0", env="SERVICE_VERSION")  # type: ignore
    HOST: str = Field(default="0.0.0.0", env="HOST")  # type: ignore
    PORT: int = Field(default=8000, env="PORT")  # type: ignore
    LOG_LEVEL: str = Field(default="info", env="LOG_LEVEL")  # type: ignore
    DEBUG: bool = Field(default=False, env="DEBUG")  # type: ignore

    # ===== CORS =====
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"], env="CORS_ORIGINS"  # type: ignore
    )

    # ===== Model Defaults =====
    DEFAULT_WINDOW_LENGTH: int = Field(default=7, env="DEFAULT_WINDOW_LENGTH")  # type: ignore
    DEFAULT_TEXT_LENGTH: int = Field(default=1000, env="DEFAULT_TEXT_LENGTH")  # type: ignore
    RANDOM_SEED: Optional[int] = Field(default=20, env="RANDOM_SEED")  # type: ignore

    # ===== Corpus =====
    CORPUS_ENCODING: str = Field(default="utf-8", env="CORPUS_ENCODING")  # type: ignore

    # ===== Model Cache =====
    MAX_CACHED_MODELS: int = Field(default=16, ge=1, env="MAX_CACHED_MODELS")  # type: ignore

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
