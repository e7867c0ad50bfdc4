"""
Configuration management for the drug harm dashboard.
"""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

# Find the project root (where .env file lives)
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parent.parent.parent  # src/utils -> src -> project root
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Display
    app_title: str = "Drug Harm Rankings"
    page_icon: str = "💊"
    chart_height: int = 600
    comparison_row_height: int = 36

    # Study selection
    default_study: str = "uk2010"
    comparison_reference_study: str = "uk2010"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def comparison_min_height(self) -> int:
        """Minimum pixel height of the cross-study comparison chart"""
        return self.chart_height + 200


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the global settings instance.

    Returns:
        Settings instance loaded from environment
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """
    Force reload settings from environment.

    Returns:
        New Settings instance
    """
    global _settings
    _settings = Settings()
    return _settings
