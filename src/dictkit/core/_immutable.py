"""
Read-only wrappers for arbitrary containers.

immutable() picks the wrapper for a value:

- Dict → same variant, same storage, immutable flag set
- other Mapping → ImmutableMapping
- set and other Set → ImmutableSet (frozenset unchanged)
- list and other Sequence → ImmutableSequence (str/bytes/tuple unchanged)
- any other object → ImmutableRecord (attribute proxy)

Wrapping is shallow: values reached through a wrapper are returned as-is,
so nested containers stay mutable unless wrapped themselves.

Methods of the wrapped container are re-exposed only if they are known
reads (_READ_METHODS). Any other method bound to the container is
replaced by one that raises ImmutableMutationError, so mutators of
subclasses (deque.appendleft, OrderedDict.move_to_end, Counter.subtract)
are refused too. Plain attributes (deque.maxlen) pass through.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import dictkit.core._dict as _dict
import dictkit.errors as errors

# Methods of the standard containers that never modify their receiver
_READ_METHODS = frozenset(
    {
        # Sequence
        "copy",
        "count",
        "index",
        # Mapping
        "get",
        "items",
        "keys",
        "values",
        # Counter
        "elements",
        "most_common",
        "total",
        # Set
        "difference",
        "intersection",
        "isdisjoint",
        "issubset",
        "issuperset",
        "symmetric_difference",
        "union",
    }
)


def _type_label(data: object) -> str:
    return type(data).__name__


def _refuse(name: str, container_type: str) -> _typing.Callable[..., _typing.NoReturn]:
    """Stand-in for a mutating method; fails when called."""

    def refuse(*args: _typing.Any, **kwargs: _typing.Any) -> _typing.NoReturn:
        raise errors.ImmutableMutationError(name, container_type)

    return refuse


def _read_attribute(data: object, name: str) -> _typing.Any:
    """Attribute of a wrapped container, with its non-read methods refused."""
    if name.startswith("_"):
        raise AttributeError(name)
    value = getattr(data, name)
    if name in _READ_METHODS:
        return value
    if getattr(value, "__self__", None) is data:
        return _refuse(name, _type_label(data))
    return value


class ImmutableMapping(_abc.Mapping[_typing.Any, _typing.Any]):
    """
    Read-only view of a mapping.

    Example:
        >>> data = {"a": [1, 2]}
        >>> view = ImmutableMapping(data)
        >>> view["a"]
        [1, 2]
        >>> view["a"] = 3  # ImmutableMutationError
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Mapping[_typing.Any, _typing.Any]) -> None:
        """
        Wrap a mapping in a read-only view.

        Args:
            data: The mapping to wrap. It is used directly (not copied), so
                  changes made through other references remain visible.
        """
        self._data = data

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        return self._data[key]

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def __delitem__(self, key: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def set(self, key: _typing.Any, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def __getattr__(self, name: str) -> _typing.Any:
        return _read_attribute(self._data, name)

    def __repr__(self) -> str:
        return f"ImmutableMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        """Not hashable (values may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class ImmutableSequence(_abc.Sequence[_typing.Any]):
    """
    Read-only view of a sequence.

    Example:
        >>> view = ImmutableSequence([1, 2, 3])
        >>> view[0]
        1
        >>> view[0] = 99  # ImmutableMutationError
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Sequence[_typing.Any]) -> None:
        """
        Wrap a sequence in a read-only view.

        Args:
            data: The sequence to wrap. It is used directly (not copied).
        """
        self._data = data

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> ImmutableSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        value = self._data[index]
        if isinstance(index, slice):
            return ImmutableSequence(value)
        return value

    def __len__(self) -> int:
        return len(self._data)

    def __setitem__(self, index: int | slice, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(index, _type_label(self._data))

    def __delitem__(self, index: int | slice) -> None:
        raise errors.ImmutableMutationError(index, _type_label(self._data))

    def __iadd__(self, other: _typing.Any) -> _typing.NoReturn:
        raise errors.ImmutableMutationError(len(self._data), _type_label(self._data))

    def set(self, index: int, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(index, _type_label(self._data))

    def __getattr__(self, name: str) -> _typing.Any:
        return _read_attribute(self._data, name)

    def __repr__(self) -> str:
        return f"ImmutableSequence({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Sequence with same content (except strings)."""
        if isinstance(other, (str, bytes)):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        """Not hashable (values may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class ImmutableSet(_abc.Set[_typing.Any]):
    """
    Read-only view of a set.

    Set operators (``|``, ``&``, ``-``, ``^``) return new frozensets.

    Example:
        >>> view = ImmutableSet({1, 2})
        >>> 1 in view
        True
        >>> view.add(3)  # ImmutableMutationError
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Set[_typing.Any]) -> None:
        self._data = data

    @classmethod
    def _from_iterable(cls, it: _typing.Iterable[_typing.Any]) -> frozenset[_typing.Any]:
        return frozenset(it)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def set(self, key: _typing.Any, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def __getattr__(self, name: str) -> _typing.Any:
        return _read_attribute(self._data, name)

    def __repr__(self) -> str:
        return f"ImmutableSet({self._data!r})"

    def __hash__(self) -> int:
        """Not hashable (the wrapped set may change)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class ImmutableRecord:
    """
    Read-only proxy for an object with named fields.

    Attribute and item reads pass through; attribute writes, attribute
    deletes and item writes raise ImmutableMutationError. Methods bound
    to the wrapped object are refused, since they may change it.

    Example:
        >>> point = types.SimpleNamespace(x=1, y=2)
        >>> view = ImmutableRecord(point)
        >>> view.x
        1
        >>> view.x = 5  # ImmutableMutationError
    """

    __slots__ = ("_data",)

    def __init__(self, data: object) -> None:
        object.__setattr__(self, "_data", data)

    def __getattr__(self, name: str) -> _typing.Any:
        return _read_attribute(self._data, name)

    def __setattr__(self, name: str, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(name, _type_label(self._data))

    def __delattr__(self, name: str) -> None:
        raise errors.ImmutableMutationError(name, _type_label(self._data))

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        return self._data[key]  # type: ignore[index]

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def __delitem__(self, key: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def set(self, key: _typing.Any, value: _typing.Any) -> None:
        raise errors.ImmutableMutationError(key, _type_label(self._data))

    def __repr__(self) -> str:
        return f"ImmutableRecord({self._data!r})"


def immutable(value: _typing.Any) -> _typing.Any:
    """
    Wrap a container so that writes fail.

    - Dict → view sharing the same entries, immutable flag set
    - Mapping → ImmutableMapping
    - Set → ImmutableSet (except frozenset)
    - Sequence → ImmutableSequence (except str/bytes/tuple)
    - Already immutable values returned as-is
    - Other objects → ImmutableRecord

    Args:
        value: Container to wrap.

    Returns:
        Read-only view. The wrapped container is not copied.

    Example:
        >>> immutable([1, 2, 3])
        ImmutableSequence([1, 2, 3])
        >>> immutable("string")
        'string'
    """
    if isinstance(value, _dict.Dict):
        if value.immutable:
            return value
        return value._derive(value._map, immutable=True)
    if isinstance(value, (ImmutableMapping, ImmutableSequence, ImmutableSet, ImmutableRecord)):
        return value
    # Already immutable scalars and containers
    if value is None or isinstance(
        value, (str, bytes, tuple, frozenset, int, float, complex, bool)
    ):
        return value
    if isinstance(value, _abc.Mapping):
        return ImmutableMapping(value)
    if isinstance(value, _abc.Set):
        return ImmutableSet(value)
    if isinstance(value, _abc.Sequence):
        return ImmutableSequence(value)
    return ImmutableRecord(value)
