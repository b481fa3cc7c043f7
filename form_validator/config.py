"""Validator configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from FORM_VALIDATOR_* environment variables."""

    # Validation
    DEFAULT_MODE: str = "onBlur"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FORM_VALIDATOR_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
