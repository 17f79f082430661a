"""
Environment Configuration.

The active environment is determined by the `NODE_ENV` environment variable
and parameterizes which .env file the resolver picks.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ENVIRONMENT = "development"


class EnvironmentSettings(BaseSettings):
    """
    Environment detection.

    Unlike the other settings classes this one never reads a .env file:
    it decides which .env file is read in the first place.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        extra="ignore",
    )

    env: str = Field(
        default=DEFAULT_ENVIRONMENT,
        validation_alias="NODE_ENV",
        description="Current environment name (development, test, staging, production, ...)",
    )

    @field_validator("env", mode="before")
    @classmethod
    def empty_means_default(cls, v: str | None) -> str:
        # NODE_ENV="" behaves like an unset variable
        return v or DEFAULT_ENVIRONMENT


def get_active_environment() -> str:
    """Read the active environment name from the process environment.

    A fresh settings object is built on every call so the value always
    reflects the current process state.
    """
    return EnvironmentSettings().env
