"""
Pure functions over dicts.

None of these functions mutate their arguments. Functions that return a
dict return one of the same variant as their first argument (same class,
default, label and immutable flag).

Example:
    >>> base = dictionary(a=1, b=2)
    >>> extend(base, dictionary(b=3, c=4))
    Dict({'a': 1, 'b': 3, 'c': 4})
    >>> base
    Dict({'a': 1, 'b': 2})
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import dictkit.config as config
import dictkit.core as core
import dictkit.errors as errors

_logger = _logging.getLogger(__name__)

CollisionPolicy = _typing.Literal["last", "first", "error"]


# =============================================================================
# Entry access
# =============================================================================


def entry(key: str, value: _typing.Any) -> core.Entry:
    """Create an Entry, validating the key."""
    return core.Entry(core.validate_key(key), value)


def entries(d: core.Dict) -> list[core.Entry]:
    """Entries of d in order."""
    return d.entries()


def keys(d: core.Dict) -> list[str]:
    """Keys of d in order."""
    return d.keys()


def values(d: core.Dict) -> list[_typing.Any]:
    """Values of d in order."""
    return d.values()


def has(d: core.Dict, key: str) -> bool:
    """True if d has an entry for key, even one holding None."""
    return d.has(key)


def omit(d: core.Dict, *keys_to_drop: str | _abc.Iterable[str]) -> core.Dict:
    """
    Return a copy of d without the given keys. Unknown keys are ignored.

    Keys may be passed one per argument or as a single iterable:
    omit(d, "a", "b") and omit(d, ["a", "b"]) are the same.
    """
    first = keys_to_drop[0] if len(keys_to_drop) == 1 else None
    if isinstance(first, _abc.Iterable) and not isinstance(first, str):
        keys_to_drop = tuple(first)
    return d._derive(d._map.without(keys_to_drop))


# =============================================================================
# Merging
# =============================================================================


def extend(d: core.Dict, *others: core.Dict) -> core.Dict:
    """
    Merge dicts left to right; later values win.

    Keys already in d keep their position. New keys are appended in the
    order they first appear.
    """
    merged = d._map.copy()
    for other in others:
        for key, value in other.entries():
            merged.set(key, value)
    return d._derive(merged)


def defaults(d: core.Dict, *fallbacks: core.Dict) -> core.Dict:
    """
    Fill keys missing from d, taking each from the first fallback that has it.

    Existing keys of d are never overwritten.
    """
    merged = d._map.copy()
    for fallback in fallbacks:
        for key, value in fallback.entries():
            if not merged.has(key):
                merged.set(key, value)
    return d._derive(merged)


# =============================================================================
# Element-wise
# =============================================================================


def map_dict(
    d: core.Dict,
    fn: _typing.Callable[[str, _typing.Any], _typing.Any],
) -> core.Dict:
    """Replace every value with fn(key, value); keys and order are kept."""
    return d._derive([(key, fn(key, value)) for key, value in d.entries()])


def keep_dict(
    d: core.Dict,
    predicate: _typing.Callable[[str, _typing.Any], bool],
) -> core.Dict:
    """Keep the entries for which predicate(key, value) is true."""
    return d._derive([(key, value) for key, value in d.entries() if predicate(key, value)])


def discard_dict(
    d: core.Dict,
    predicate: _typing.Callable[[str, _typing.Any], bool],
) -> core.Dict:
    """Drop the entries for which predicate(key, value) is true."""
    return d._derive(
        [(key, value) for key, value in d.entries() if not predicate(key, value)]
    )


def compact_dict(d: core.Dict) -> core.Dict:
    """Drop the entries whose value is None."""
    return discard_dict(d, lambda _key, value: value is None)


# =============================================================================
# Inversion and comparison
# =============================================================================


def _key_for(value: _typing.Any) -> str:
    """Stringify a value for use as a key."""
    return value if isinstance(value, str) else str(value)


def invert(d: core.Dict, *, on_collision: CollisionPolicy | None = None) -> core.Dict:
    """
    Swap keys and values.

    Values become keys via str() (strings are used as-is); keys become
    values.

    Args:
        d: Dict to invert.
        on_collision: What to do when two values give the same key:
            "last" keeps the later entry (its key moves to the position of
            the earlier one), "first" keeps the earlier entry, "error"
            raises. Defaults to settings.invert_collision.

    Raises:
        InvalidKeyError: If a value stringifies to "", or on a collision
            under the "error" policy.
        ConfigurationError: If on_collision is not a known policy.
    """
    policy = on_collision or config.get_settings().invert_collision
    if policy not in _typing.get_args(CollisionPolicy):
        raise errors.ConfigurationError(
            f"Unknown collision policy {policy!r}; expected one of "
            f"{', '.join(_typing.get_args(CollisionPolicy))}"
        )
    inverted = core.OrderedMap()
    for key, value in d.entries():
        new_key = _key_for(value)
        if inverted.has(new_key):
            if policy == "error":
                raise errors.InvalidKeyError(new_key, "duplicate key produced by invert")
            _logger.debug(
                "invert: value %r maps to key %r already taken; keeping %s",
                value,
                new_key,
                policy,
            )
            if policy == "first":
                continue
        inverted.set(new_key, key)
    return d._derive(inverted)


def equals(d: core.Dict, other: core.Dict) -> core.Dict:
    """
    Compare two dicts key by key.

    Returns:
        Dict over the keys of d followed by the keys only in other. A key
        maps to True when both dicts have it with equal values.

    Example:
        >>> equals(dictionary(a=1, b=2), dictionary(a=1, b=3))
        Dict({'a': True, 'b': False})
    """
    result: list[tuple[str, bool]] = []
    for key in d.keys():
        value, found = other.lookup(key)
        result.append((key, found and _values_equal(d.lookup(key)[0], value)))
    for key in other.keys():
        if not d.has(key):
            result.append((key, False))
    return core.Dict(result)


def _values_equal(left: _typing.Any, right: _typing.Any) -> bool:
    """Deep value equality, guarding against non-bool __eq__ results."""
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        # e.g. array-like values whose == is element-wise
        return left is right
