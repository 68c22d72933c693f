"""
Configuration module - centralized settings for the landmark linter.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Linter settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override, set environment variables:
        export MAX_NUMBER_OF_PROBLEMS=20
        export SEMANTIC_EXCLUDE=true
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Landmark Lint"

    # DEBUG: Verbose logging for the command line script
    DEBUG: bool = False

    # ---------------------------------------------------------------------------
    # PARSING
    # ---------------------------------------------------------------------------
    # HTML_PARSER: BeautifulSoup tree builder
    # - "html.parser" ships with Python and needs no extra install
    # - "lxml" / "html5lib" work too if those packages are installed
    HTML_PARSER: str = "html.parser"

    # ---------------------------------------------------------------------------
    # DIAGNOSTICS
    # ---------------------------------------------------------------------------
    # MAX_NUMBER_OF_PROBLEMS: Findings reported per document before truncation
    MAX_NUMBER_OF_PROBLEMS: int = Field(default=100, ge=0)

    # SEMANTIC_EXCLUDE: Skip structural (landmark) findings entirely.
    # Landmarks are still detected and returned.
    SEMANTIC_EXCLUDE: bool = False

    # NAV_MIN_LINKS: Links a block needs before it can be inferred as navigation
    NAV_MIN_LINKS: int = Field(default=3, ge=1)


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from landmark_lint.core.config import settings
settings = Settings()
