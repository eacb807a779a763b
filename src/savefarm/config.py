"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    host: str = "0.0.0.0"
    port: int = 3000
    data_dir: Path = Path("data")
    users_file: str = "users.json"
    recipes_file: str = "shared_recipes.json"
    sessions_file: str = "sessions.json"
    session_backend: str = "memory"
    cors_allowed_origins: str = "*"
    keyword_match_policy: str = "substring"
    hf_token: str | None = None
    hf_model: str = "sshleifer/tiny-gpt2"
    hf_base_url: str = "https://api-inference.huggingface.co/models"
    mealdb_base_url: str = "https://www.themealdb.com/api/json/v1/1"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def recipes_path(self) -> Path:
        return self.data_dir / self.recipes_file

    @property
    def sessions_path(self) -> Path:
        return self.data_dir / self.sessions_file


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS origin list; empty or ``*`` allows all."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]


def has_usable_hf_token(token: str | None) -> bool:
    """Hugging Face user tokens always start with ``hf_``."""
    return bool(token) and token.startswith("hf_")
