"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with DICTKIT_ prefix
3. YAML file named by DICTKIT_CONFIG_FILE
4. Field defaults

Example:
  DICTKIT_NULL_REPR=nil
  DICTKIT_INVERT_COLLISION=error
"""

import functools as _functools
import logging as _logging
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import dictkit.config.sources as sources
import dictkit.constants as constants

CollisionPolicy = _typing.Literal["last", "first", "error"]


class Settings(_pydantic_settings.BaseSettings):
    """
    dictkit configuration settings.

    All settings can be overridden via environment variables with DICTKIT_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="DICTKIT_",
        extra="ignore",
    )

    null_repr: str = _pydantic.Field(
        default=constants.DEFAULT_NULL_REPR,
        description="Text shown for None values when rendering",
    )

    separator: str = _pydantic.Field(
        default=constants.DEFAULT_SEPARATOR,
        description="Text between the aligned key and its value when rendering",
    )

    invert_collision: CollisionPolicy = _pydantic.Field(
        default="last",
        description="What invert() does when two values map to the same key",
    )

    log_level: str = _pydantic.Field(
        default="WARNING",
        description="Logging level configured by the command line tool",
    )

    @_pydantic.field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(_logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) (highest)
        2. env_settings (DICTKIT_* env vars)
        3. yaml settings (DICTKIT_CONFIG_FILE)
        4. (defaults via Field definitions) (lowest)
        """
        return (
            init_settings,
            env_settings,
            sources.YamlFileSettingsSource(settings_cls),
        )


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
