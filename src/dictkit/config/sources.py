"""Custom pydantic-settings source for dictkit configuration.

This module provides:

- YamlFileSettingsSource: loads settings from a single YAML file named by
  the DICTKIT_CONFIG_FILE environment variable (or passed explicitly).

A missing variable means no file layer. A variable naming a file that
does not exist, cannot be read, or does not hold a YAML mapping is an
error, surfaced as ConfigFileError.
"""

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import dictkit.errors as errors

_logger = _logging.getLogger(__name__)

# Environment variable naming the settings file
ENV_CONFIG_FILE = "DICTKIT_CONFIG_FILE"


def get_config_file_path() -> _pathlib.Path | None:
    """Return the settings file path from the environment, if set."""
    if path := _os.environ.get(ENV_CONFIG_FILE):
        return _pathlib.Path(path)
    return None


def load_yaml_file(path: _pathlib.Path) -> dict[str, _typing.Any]:
    """
    Load a YAML settings file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed contents; an empty file yields an empty dict.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed YAML,
            or contains non-dict content at the top level.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise errors.ConfigFileError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise errors.ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise errors.ConfigFileError(path, f"invalid YAML: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        type_name = type(parsed).__name__
        raise errors.ConfigFileError(
            path,
            f"config must be a YAML mapping (dict), got {type_name}",
        )

    return parsed


class YamlFileSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source backed by one optional YAML file.

    Sits below environment variables and constructor arguments and above
    field defaults.
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            config_path: Override path for the settings file (for testing).
                If not provided, uses DICTKIT_CONFIG_FILE.
        """
        super().__init__(settings_cls)
        self._config_path = config_path or get_config_file_path()
        self._data: dict[str, _typing.Any] = {}
        if self._config_path is not None:
            _logger.debug("Loading settings from %s", self._config_path)
            self._data = load_yaml_file(self._config_path)

    @property
    def config_path(self) -> _pathlib.Path | None:
        """The file this source read, if any."""
        return self._config_path

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """
        Get value for a field from the loaded file.

        Returns:
            Tuple of (value, field_name, is_complex).
        """
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, (_abc.Mapping, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """Return the file contents for Pydantic validation."""
        return dict(self._data)
