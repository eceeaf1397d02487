"""Application configuration contract."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cmdparser.errors import ConfigError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="WARNING")
    prompt: str = Field(alias="CMDPARSER_PROMPT", default="> ")
    error_prefix: str = Field(
        alias="CMDPARSER_ERROR_PREFIX", default="Failed to execute command"
    )


def validate_settings(settings: Settings) -> None:
    problems: list[str] = []
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        problems.append(f"LOG_LEVEL({settings.log_level})")
    if not settings.prompt:
        problems.append("CMDPARSER_PROMPT(non-empty value)")

    if problems:
        raise ConfigError(f"invalid configuration: {', '.join(problems)}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
