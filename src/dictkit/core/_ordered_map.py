"""
OrderedMap: ordered storage with unique, non-empty string keys.

Backs every Dict variant. Insertion order is observable: setting an
existing key replaces its value in place, setting a new key appends.

Thread safety: NOT thread-safe for concurrent writes.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import dictkit.core._types as _types
import dictkit.errors as errors

EntryLike: _typing.TypeAlias = "_types.Entry | tuple[str, _typing.Any]"


class OrderedMap:
    """
    Ordered sequence of entries keyed by unique strings.

    Example:
        >>> om = OrderedMap([("a", 1), ("b", None)])
        >>> om.get("b")
        (None, True)
        >>> om.get("c")
        (MISSING, False)
        >>> om.set("a", 2).keys()
        ['a', 'b']
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        entries: _typing.Iterable[EntryLike] | _abc.Mapping[str, _typing.Any] = (),
    ) -> None:
        """
        Build from (key, value) pairs, or from the items of a mapping.

        Raises:
            InvalidKeyError: If an element is not a pair, or a key is
                invalid or appears twice.
        """
        if isinstance(entries, _abc.Mapping):
            entries = entries.items()
        self._data: dict[str, _typing.Any] = {}
        for item in entries:
            key, value = _types.as_pair(item)
            _types.validate_key(key)
            if key in self._data:
                raise errors.InvalidKeyError(key, "duplicate key")
            self._data[key] = value

    @classmethod
    def create(cls, entries: _typing.Iterable[EntryLike]) -> OrderedMap:
        """Alias for the constructor."""
        return cls(entries)

    def get(self, key: str) -> tuple[_typing.Any, bool]:
        """
        Look up a key.

        Returns:
            (value, True) if present, (MISSING, False) otherwise.
        """
        if key in self._data:
            return self._data[key], True
        return _types.MISSING, False

    def has(self, key: object) -> bool:
        """True if the key has an entry, even one holding None."""
        return isinstance(key, str) and key in self._data

    def set(self, key: str, value: _typing.Any) -> OrderedMap:
        """
        Set a value, keeping the position of an existing key.

        Returns:
            self, to allow chaining.
        """
        _types.validate_key(key)
        self._data[key] = value
        return self

    def without(self, keys: _typing.Iterable[str]) -> OrderedMap:
        """Return a copy without the given keys. Unknown keys are ignored."""
        dropped = set(keys)
        result = OrderedMap()
        result._data = {k: v for k, v in self._data.items() if k not in dropped}
        return result

    def copy(self) -> OrderedMap:
        """Shallow copy."""
        result = OrderedMap()
        result._data = dict(self._data)
        return result

    def keys(self) -> list[str]:
        return list(self._data)

    def values(self) -> list[_typing.Any]:
        return list(self._data.values())

    def entries(self) -> list[_types.Entry]:
        return [_types.Entry(k, v) for k, v in self._data.items()]

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"OrderedMap({list(self._data.items())!r})"
