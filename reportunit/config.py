"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str = "sqlite:///./reportunit.db"
    debug: bool = False
    log_level: str = "INFO"

    # Parser
    max_workers: int = 4  # threads used to build tests
    max_upload_bytes: int = 10 * 1024 * 1024

    model_config = {"env_prefix": "REPORTUNIT_"}


settings = Settings()
