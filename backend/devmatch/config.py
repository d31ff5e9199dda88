from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    database_url: str = "sqlite:///./data/devmatch.db"
    secret_key: str = "dev-secret-key-change-in-production"
    session_expire_days: int = 30
    log_level: str = "INFO"

    # Frontend origins allowed by CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # GitHub REST API
    github_api_url: str = "https://api.github.com"
    github_timeout: float = 30.0
    github_repos_per_page: int = 10

    # Candidates scored per feed request
    feed_batch_size: int = 10

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
