"""
Shared types for the dict core.

- Entry: one (key, value) pair
- MISSING: the absence marker returned by permissive lookups
- validate_key: the key rules every OrderedMap enforces
- as_pair: the shape rule for one construction entry
"""

from __future__ import annotations

import dataclasses as _dataclasses
import typing as _typing

import dictkit.errors as errors


# Helper function to reconstruct MISSING singleton during unpickle
def _get_missing_singleton() -> _MissingType:
    """Return the MISSING singleton. Called by pickle to reconstruct."""
    return MISSING


class _MissingType:
    """
    Sentinel type returned when a permissive lookup finds no entry.

    Distinct from None, which is a storable value.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[_typing.Callable[[], _MissingType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_missing_singleton, ())


MISSING = _MissingType()


@_dataclasses.dataclass(frozen=True, slots=True)
class Entry:
    """One key/value pair. Unpacks as ``key, value``."""

    key: str
    value: _typing.Any

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        yield self.key
        yield self.value


def validate_key(key: object) -> str:
    """
    Check that a key is usable in an OrderedMap.

    Args:
        key: Candidate key.

    Returns:
        The key, unchanged.

    Raises:
        InvalidKeyError: If the key is not a string or is empty.
    """
    if not isinstance(key, str):
        raise errors.InvalidKeyError(key, f"keys must be strings, not {type(key).__name__}")
    if not key:
        raise errors.InvalidKeyError(key, "keys must not be empty")
    return key


def as_pair(item: object) -> tuple[_typing.Any, _typing.Any]:
    """
    Interpret one element as a (key, value) pair.

    Raises:
        InvalidKeyError: If the element is not an Entry or a 2-item tuple/list.
    """
    if isinstance(item, Entry):
        return item.key, item.value
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return item[0], item[1]
    raise errors.InvalidKeyError(item, "unnamed member; expected a (name, value) pair")
