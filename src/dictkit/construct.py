"""
Functions that create dicts.

- dictionary(): from (name, value) pairs and keyword arguments
- make_dict(): from parallel key and value sequences
- as_dict(): from an existing record (mapping, dataclass, pydantic model,
  or iterable of pairs)
- default_dict(), strict_dict(), immutable_dict(): variant shortcuts
- with_default(), with_strict(): re-create a dict as another variant

Keyword names `label` and `default` are reserved by these functions; pass
entries with those names as (name, value) pairs instead.
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import logging as _logging
import typing as _typing

import pydantic as _pydantic

import dictkit.core as core
import dictkit.errors as errors

_logger = _logging.getLogger(__name__)


def _collect(
    pairs: tuple[_typing.Any, ...],
    named: dict[str, _typing.Any],
) -> list[tuple[str, _typing.Any]]:
    """Merge positional (name, value) pairs and keyword entries, in call order."""
    entries = [core.as_pair(pair) for pair in pairs]
    entries.extend(named.items())
    return entries


def dictionary(
    *pairs: tuple[str, _typing.Any],
    label: str | None = None,
    **named: _typing.Any,
) -> core.Dict:
    """
    Create a Dict from explicit entries.

    Args:
        *pairs: (name, value) pairs, placed first.
        label: Optional name used in diagnostics.
        **named: Entries given as keyword arguments, in call order.

    Raises:
        InvalidKeyError: If a name is invalid or given twice.

    Example:
        >>> dictionary(("os", "linux"), version=6)
        Dict({'os': 'linux', 'version': 6})
    """
    return core.build(_collect(pairs, named), label=label)


def make_dict(
    keys: _abc.Iterable[str],
    values: _abc.Iterable[_typing.Any],
    *,
    label: str | None = None,
) -> core.Dict:
    """
    Create a Dict from parallel key and value sequences.

    Raises:
        LengthMismatchError: If keys and values differ in length.
        InvalidKeyError: If a key is invalid or repeated.
    """
    keys = list(keys)
    values = list(values)
    if len(keys) != len(values):
        raise errors.LengthMismatchError(len(keys), len(values))
    return core.build(zip(keys, values, strict=True), label=label)


def _record_entries(record: _typing.Any) -> list[tuple[str, _typing.Any]]:
    """Extract ordered (name, value) pairs from a supported record type."""
    if isinstance(record, core.Dict):
        return [(entry.key, entry.value) for entry in record.entries()]
    if isinstance(record, _abc.Mapping):
        return list(record.items())
    if isinstance(record, _pydantic.BaseModel):
        # Iterating a model yields (field, value) pairs, extras included
        return list(record)
    if _dataclasses.is_dataclass(record) and not isinstance(record, type):
        return [(f.name, getattr(record, f.name)) for f in _dataclasses.fields(record)]
    if isinstance(record, (str, bytes)) or not isinstance(record, _abc.Iterable):
        raise TypeError(f"Cannot convert {type(record).__name__} to a dict")
    return [core.as_pair(item) for item in record]


def as_dict(record: _typing.Any, *, label: str | None = None) -> core.Dict:
    """
    Convert a record into a Dict, keeping its iteration order.

    Supported records: Dict, any Mapping, pydantic models, dataclass
    instances, and iterables of (name, value) pairs.

    Args:
        record: Object to convert.
        label: Optional name used in diagnostics. A Dict keeps its own
            label when none is given.

    Raises:
        InvalidKeyError: If a member is unnamed, a name is invalid, or a
            name is repeated.
        TypeError: If the object is not a supported record.
    """
    entries = _record_entries(record)
    if label is None and isinstance(record, core.Dict):
        label = record.label
    _logger.debug("Converting %s with %d members", type(record).__name__, len(entries))
    return core.build(entries, label=label)


def default_dict(
    *pairs: tuple[str, _typing.Any],
    default: _typing.Any = None,
    label: str | None = None,
    **named: _typing.Any,
) -> core.DefaultDict:
    """
    Create a DefaultDict; missing keys read as `default`.

    Example:
        >>> d = default_dict(a=1, default=0)
        >>> d.b
        0
    """
    result = core.build(_collect(pairs, named), default=default, label=label)
    return _typing.cast(core.DefaultDict, result)


def strict_dict(
    *pairs: tuple[str, _typing.Any],
    label: str | None = None,
    **named: _typing.Any,
) -> core.StrictDict:
    """Create a StrictDict; missing keys raise KeyNotFoundError."""
    result = core.build(_collect(pairs, named), strict=True, label=label)
    return _typing.cast(core.StrictDict, result)


def immutable_dict(
    *pairs: tuple[str, _typing.Any],
    label: str | None = None,
    **named: _typing.Any,
) -> core.Dict:
    """Create a Dict whose writes raise ImmutableMutationError."""
    return core.build(_collect(pairs, named), immutable=True, label=label)


def with_default(d: core.Dict, value: _typing.Any) -> core.DefaultDict:
    """
    Re-create a dict as a DefaultDict with the given default.

    The immutable flag and label carry over; entries are copied.

    Raises:
        ConfigurationError: If d is strict.
    """
    result = core.build(
        d.entries(),
        default=value,
        strict=d.strict,
        immutable=d.immutable,
        label=d.label,
    )
    return _typing.cast(core.DefaultDict, result)


def with_strict(d: core.Dict) -> core.StrictDict:
    """
    Re-create a dict as a StrictDict.

    Raises:
        ConfigurationError: If d is a DefaultDict.
    """
    default = d.default if isinstance(d, core.DefaultDict) else core.UNSET
    result = core.build(
        d.entries(),
        default=default,
        strict=True,
        immutable=d.immutable,
        label=d.label,
    )
    return _typing.cast(core.StrictDict, result)
