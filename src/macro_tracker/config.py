"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    github_token: str
    github_api_url: str = "https://api.github.com"
    github_repo_owner: str = "PeterBowles"
    github_repo_name: str = "Macro_Tracker"
    github_file_path: str = "data.json"
    github_branch: str = "main"
    github_timeout_seconds: float = 15
    refresh_sha_before_commit: bool = False
    transport: Literal["http", "stdio"] = "http"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 7870
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def repository(self) -> str:
        """Repository in owner/name form."""
        return f"{self.github_repo_owner}/{self.github_repo_name}"
