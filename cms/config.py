"""
Application configuration using pydantic-settings.
Loads from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# cms/ -> project root
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage (unset -> derived from environment, see properties below)
    data_dir: Optional[Path] = None
    credentials_file: Optional[Path] = None

    # Sessions
    session_secret: str = "change-this-in-production-minimum-32-characters-long"
    session_cookie: str = "cms_session"
    session_max_age: int = 14 * 24 * 60 * 60  # 14 days

    # Application
    debug: bool = False
    environment: str = "development"  # development, test, production
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    project_name: str = "Flat-file CMS"
    version: str = "1.0.0"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @property
    def documents_root(self) -> Path:
        """Directory holding the documents. Test runs never touch the real data."""
        if self.data_dir is not None:
            return Path(self.data_dir)
        if self.is_test:
            return BASE_DIR / "tests" / "data"
        return BASE_DIR / "data"

    @property
    def credentials_path(self) -> Path:
        """YAML file of `username: hash` rows."""
        if self.credentials_file is not None:
            return Path(self.credentials_file)
        if self.is_test:
            return BASE_DIR / "tests" / "user_accounts.yml"
        return BASE_DIR / "user_accounts.yml"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
