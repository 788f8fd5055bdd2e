from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class GitHubConfig(BaseModel):
    """Connection details for one repository, frozen once built."""

    model_config = ConfigDict(frozen=True)

    owner: str = ""
    repo: str = ""
    token: str = ""
    branch: str = "main"
    api_url: str = "https://api.github.com"

    @property
    def is_configured(self) -> bool:
        return bool(self.owner and self.repo and self.token)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # GitHub
    GITHUB_USERNAME: str = ""
    GITHUB_REPO: str = ""
    GITHUB_TOKEN: str = ""
    GITHUB_BRANCH: str = "main"
    GITHUB_API_URL: str = "https://api.github.com"
    HTTP_TIMEOUT_SECONDS: float = 15.0

    # Blog
    DEFAULT_AUTHOR: str = "小中"
    PUBLISH_PATHS: List[str] = ["/content/blog", "/content/shorts", "/content/books"]
    DEFAULT_PUBLISH_PATH: str = "/content/blog"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key
    ZOLA_API_KEY: str = ""

    @property
    def is_configured(self) -> bool:
        return self.github_config().is_configured

    def github_config(self) -> GitHubConfig:
        return GitHubConfig(
            owner=self.GITHUB_USERNAME,
            repo=self.GITHUB_REPO,
            token=self.GITHUB_TOKEN,
            branch=self.GITHUB_BRANCH,
            api_url=self.GITHUB_API_URL.rstrip("/"),
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
