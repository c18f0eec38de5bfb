"""
Exceptions raised by dictkit.

Every error derives from DictError and from the builtin exception a caller
would naturally catch for the same situation (ValueError, KeyError,
TypeError), so code written against plain dicts keeps working.

A miss on a permissive dict is not an error: it returns MISSING.
"""

from __future__ import annotations

import pathlib as _pathlib
import typing as _typing


class DictError(Exception):
    """Base class for all dictkit errors."""

    pass


class InvalidKeyError(DictError, ValueError):
    """Raised when a key is not a non-empty string, or is duplicated."""

    def __init__(self, key: _typing.Any, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid key {key!r}: {reason}")


class LengthMismatchError(DictError, ValueError):
    """Raised when parallel key and value sequences differ in length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} values for {expected} keys, got {actual}")


class KeyNotFoundError(DictError, KeyError):
    """
    Raised by strict dicts when a key is missing.

    Subclasses KeyError so Mapping helpers (`in`, `get`) keep working.
    """

    def __init__(self, key: str, label: str | None = None) -> None:
        self.key = key
        self.label = label
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would repr the single argument
        where = f" in dict {self.label!r}" if self.label else ""
        return f"Key {self.key!r} not found{where}"


class AttributeNotFoundError(KeyNotFoundError, AttributeError):
    """
    Raised by strict dicts when an attribute read names a missing key.

    Also an AttributeError, so hasattr() and getattr() with a default work.
    """

    pass


class ImmutableMutationError(DictError, TypeError):
    """Raised on any write to an immutable container."""

    def __init__(self, key: _typing.Any, container_type: str) -> None:
        self.key = key
        self.container_type = container_type
        super().__init__(f"Cannot modify {key!r}: {container_type} is immutable")


class ConfigurationError(DictError, ValueError):
    """Raised when variant options conflict, e.g. default together with strict."""

    pass


class ConfigFileError(DictError):
    """Error loading or parsing a settings file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")
