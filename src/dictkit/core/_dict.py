"""
Dict and its variants.

- Dict: permissive; a miss returns MISSING
- DefaultDict: a miss returns the configured default
- StrictDict: a miss raises KeyNotFoundError

Any variant may carry the immutable flag, which turns every write entry
point (item write, attribute write, set, set_many, default reassignment)
into ImmutableMutationError.

Read semantics:
- d["k"] and d.k return the value or the variant's miss result
- d["a", "b"] returns a new dict of the same variant with the keys found

Thread safety: NOT thread-safe for concurrent writes. Read-only
concurrent access is safe.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import dictkit.core._ordered_map as _ordered_map
import dictkit.core._types as _types
import dictkit.errors as errors
import dictkit.render as render

_logger = _logging.getLogger(__name__)


class _UnsetType:
    """Sentinel for 'no default given', since None is a valid default."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<UNSET>"


UNSET = _UnsetType()


class Dict(_abc.Mapping[str, _typing.Any]):
    """
    Ordered mapping with unique, non-empty string keys.

    Example:
        >>> d = Dict([("a", 1), ("b", None)])
        >>> d["b"] is None  # stored None is a value
        True
        >>> d["c"]  # absent key
        MISSING
        >>> d["a", "c"]
        Dict({'a': 1})

    Args:
        entries: (key, value) pairs, a mapping, or an OrderedMap. An
            OrderedMap is used directly (not copied).
        label: Optional name shown in error messages.
        immutable: If True, every write raises ImmutableMutationError.

    Note:
        Attribute access (``d.name``) reads and writes entries for names
        that are not part of the Dict API and do not start with ``_``.
        Use item access for any other key.
    """

    __slots__ = ("_map", "_label", "_immutable")

    _strict: _typing.ClassVar[bool] = False

    def __init__(
        self,
        entries: _typing.Iterable[_typing.Any] | _ordered_map.OrderedMap = (),
        *,
        label: str | None = None,
        immutable: bool = False,
    ) -> None:
        if isinstance(entries, _ordered_map.OrderedMap):
            self._map = entries
        else:
            self._map = _ordered_map.OrderedMap(entries)
        self._label = label
        self._immutable = immutable

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def label(self) -> str | None:
        """Name used in diagnostics."""
        return self._label

    @property
    def immutable(self) -> bool:
        """True if writes are disabled."""
        return self._immutable

    @property
    def strict(self) -> bool:
        """True if a miss raises KeyNotFoundError."""
        return self._strict

    def _config(self) -> dict[str, _typing.Any]:
        """Constructor options that reproduce this dict's variant."""
        return {"label": self._label, "immutable": self._immutable}

    def _derive(
        self,
        entries: _typing.Iterable[_typing.Any] | _ordered_map.OrderedMap,
        **overrides: _typing.Any,
    ) -> Dict:
        """Create a dict of the same variant holding other entries."""
        config = self._config()
        config.update(overrides)
        return type(self)(entries, **config)

    def _check_mutable(self, key: _typing.Any) -> None:
        if self._immutable:
            raise errors.ImmutableMutationError(key, type(self).__name__)

    def _missing(self, key: _typing.Any) -> _typing.Any:
        """Result of a single-key miss."""
        return _types.MISSING

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def lookup(self, key: str) -> tuple[_typing.Any, bool]:
        """
        Look up a key without applying the variant's miss policy.

        Returns:
            (value, True) if present, (MISSING, False) otherwise.
        """
        if not isinstance(key, str):
            return _types.MISSING, False
        return self._map.get(key)

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        if isinstance(key, (tuple, list)):
            return self.get_many(key)
        value, found = self.lookup(key)
        if found:
            return value
        return self._missing(key)

    def get_many(self, keys: _typing.Iterable[str]) -> Dict:
        """
        Select several keys at once.

        Keys not present are skipped, except on a strict dict where the
        first missing key (in requested order) raises KeyNotFoundError.

        Returns:
            New dict of the same variant, in requested order.
        """
        selected: list[tuple[str, _typing.Any]] = []
        seen: set[str] = set()
        for key in keys:
            value, found = self.lookup(key)
            if not found:
                if self._strict:
                    raise errors.KeyNotFoundError(key, self._label)
                continue
            if key not in seen:
                seen.add(key)
                selected.append((key, value))
        return self._derive(selected)

    def get(self, key: str, default: _typing.Any = None) -> _typing.Any:
        """Return the value for key if present, else default."""
        value, found = self.lookup(key)
        return value if found else default

    def has(self, key: object) -> bool:
        """True if the key has an entry, including one holding None."""
        return self._map.has(key)

    def __contains__(self, key: object) -> bool:
        return self._map.has(key)

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def keys(self) -> list[str]:  # type: ignore[override]
        """Keys in insertion order."""
        return self._map.keys()

    def values(self) -> list[_typing.Any]:  # type: ignore[override]
        """Values in insertion order."""
        return self._map.values()

    def entries(self) -> list[_types.Entry]:
        """Entries in insertion order."""
        return self._map.entries()

    def to_dict(self) -> dict[str, _typing.Any]:
        """Plain dict copy of the entries."""
        return dict(zip(self._map.keys(), self._map.values(), strict=True))

    def copy(self) -> Dict:
        """Shallow copy with the same variant and flags."""
        return self._derive(self._map.copy())

    def __getattr__(self, name: str) -> _typing.Any:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        value, found = self.lookup(name)
        if found:
            return value
        try:
            return self._missing(name)
        except errors.KeyNotFoundError:
            # hasattr() and getattr() with a default expect AttributeError
            raise errors.AttributeNotFoundError(name, self._label) from None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def set(self, key: str, value: _typing.Any) -> Dict:
        """
        Set a value. An existing key keeps its position.

        Returns:
            self.

        Raises:
            ImmutableMutationError: If the dict is immutable.
            InvalidKeyError: If the key is not a non-empty string.
        """
        self._check_mutable(key)
        self._map.set(key, value)
        return self

    def set_many(
        self,
        keys: _typing.Iterable[str],
        values: _typing.Iterable[_typing.Any],
    ) -> Dict:
        """
        Set several keys positionally. Nothing is written if validation fails.

        Raises:
            ImmutableMutationError: If the dict is immutable.
            LengthMismatchError: If keys and values differ in length.
            InvalidKeyError: If any key is invalid.
        """
        keys = list(keys)
        self._check_mutable(keys[0] if keys else None)
        values = list(values)
        if len(keys) != len(values):
            raise errors.LengthMismatchError(len(keys), len(values))
        for key in keys:
            _types.validate_key(key)
        for key, value in zip(keys, values, strict=True):
            self._map.set(key, value)
        return self

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        if isinstance(key, (tuple, list)):
            self.set_many(key, value)
        else:
            self.set(key, value)

    def __delitem__(self, key: _typing.Any) -> None:
        self._check_mutable(key)
        raise TypeError(
            f"{type(self).__name__} does not support item deletion; use omit(d, {key!r})"
        )

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        if name.startswith("_") or isinstance(getattr(type(self), name, None), property):
            object.__setattr__(self, name, value)
        elif hasattr(type(self), name):
            raise AttributeError(
                f"{name!r} is a {type(self).__name__} method; use d[{name!r}] = value"
            )
        else:
            self.set(name, value)

    # -------------------------------------------------------------------------
    # Presentation and comparison
    # -------------------------------------------------------------------------

    def _repr_options(self) -> str:
        return ", immutable=True" if self._immutable else ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r}{self._repr_options()})"

    def __str__(self) -> str:
        return render.format_dict(self)

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with the same content."""
        if isinstance(other, _abc.Mapping):
            return self.to_dict() == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        """Dicts are not hashable (they may be mutated)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class DefaultDict(Dict):
    """
    Dict whose misses return a default value.

    The default can be changed later through the ``default`` property.

    Example:
        >>> d = DefaultDict([("a", 1)], default=0)
        >>> d["b"]
        0
        >>> d.default = -1
        >>> d.b
        -1
    """

    __slots__ = ("_default",)

    def __init__(
        self,
        entries: _typing.Iterable[_typing.Any] | _ordered_map.OrderedMap = (),
        *,
        default: _typing.Any = None,
        label: str | None = None,
        immutable: bool = False,
    ) -> None:
        super().__init__(entries, label=label, immutable=immutable)
        self._default = default

    @property
    def default(self) -> _typing.Any:
        """Value returned for missing keys."""
        return self._default

    @default.setter
    def default(self, value: _typing.Any) -> None:
        self._check_mutable("default")
        self._default = value

    def _config(self) -> dict[str, _typing.Any]:
        config = super()._config()
        config["default"] = self._default
        return config

    def _missing(self, key: _typing.Any) -> _typing.Any:
        return self._default

    def _repr_options(self) -> str:
        return f", default={self._default!r}{super()._repr_options()}"


class StrictDict(Dict):
    """
    Dict whose misses raise KeyNotFoundError.

    KeyNotFoundError is a KeyError, so ``in`` and ``get()`` behave as on
    a plain dict.
    """

    __slots__ = ()

    _strict: _typing.ClassVar[bool] = True

    def _missing(self, key: _typing.Any) -> _typing.Any:
        raise errors.KeyNotFoundError(key, self._label)


def build(
    entries: _typing.Iterable[_typing.Any] | _ordered_map.OrderedMap = (),
    *,
    default: _typing.Any = UNSET,
    strict: bool = False,
    immutable: bool = False,
    label: str | None = None,
) -> Dict:
    """
    Create a dict of the variant implied by the options.

    Args:
        entries: (key, value) pairs.
        default: If given, build a DefaultDict with this default.
        strict: If True, build a StrictDict.
        immutable: Set the immutable flag.
        label: Name used in diagnostics.

    Raises:
        ConfigurationError: If both default and strict are requested.
    """
    if strict and default is not UNSET:
        raise errors.ConfigurationError("A dict cannot be both strict and have a default value")

    result: Dict
    if strict:
        result = StrictDict(entries, label=label, immutable=immutable)
    elif default is not UNSET:
        result = DefaultDict(entries, default=default, label=label, immutable=immutable)
    else:
        result = Dict(entries, label=label, immutable=immutable)

    _logger.debug(
        "Built %s with %d entries (label=%r, immutable=%s)",
        type(result).__name__,
        len(result),
        label,
        immutable,
    )
    return result
