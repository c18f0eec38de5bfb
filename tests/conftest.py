"""
Shared pytest fixtures for dictkit tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest

import dictkit
import dictkit.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "DICTKIT_CONFIG_FILE",
    "DICTKIT_NULL_REPR",
    "DICTKIT_SEPARATOR",
    "DICTKIT_INVERT_COLLISION",
    "DICTKIT_LOG_LEVEL",
]


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Run every test with default settings and no DICTKIT_* environment."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """Click runner with DICTKIT_* variables removed from its environment."""
    clean_env = {k: v for k, v in _os.environ.items() if not k.startswith("DICTKIT_")}
    return _click_testing.CliRunner(env=clean_env)


@_pytest.fixture
def sample() -> dictkit.Dict:
    """Base dict with a None value in the middle."""
    return dictkit.dictionary(a=1, b=None, c="three")
