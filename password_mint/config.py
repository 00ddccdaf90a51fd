"""
Configuration loaded from environment variables
Only CLI defaults live here - the derivation pipeline never reads settings
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
import logging

from password_mint.constants import ITERATIONS, MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH


# Find .env file - could be in current dir, project root, or absent
def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    root_env = Path(__file__).parent.parent / ".env"
    if root_env.exists():
        return str(root_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Derivation defaults
    MINT_DEFAULT_LENGTH: int = 20
    MINT_DEFAULT_SECURITY_LEVEL: str = "standard"
    MINT_DEFAULT_VERSION: str = "1"

    # Pool filters
    MINT_EXCLUDE_AMBIGUOUS: bool = False
    MINT_EXCLUDE_PROBLEMATIC: bool = False

    # Logging
    MINT_LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = _find_env_file()
        case_sensitive = True
        extra = "ignore"


def validate_settings(active_settings: Settings) -> None:
    """Validate configured defaults before they reach a derivation."""
    errors = []

    length = active_settings.MINT_DEFAULT_LENGTH
    if not MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH:
        errors.append(
            f"MINT_DEFAULT_LENGTH must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
        )

    if active_settings.MINT_DEFAULT_SECURITY_LEVEL not in ITERATIONS:
        allowed = ", ".join(ITERATIONS)
        errors.append(f"MINT_DEFAULT_SECURITY_LEVEL must be one of: {allowed}")

    if not active_settings.MINT_DEFAULT_VERSION.strip():
        errors.append("MINT_DEFAULT_VERSION must be a non-empty value")

    level_name = str(active_settings.MINT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        errors.append("MINT_LOG_LEVEL must be a logging level name")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
