"""
Core dict types: OrderedMap storage, the Dict variants and immutable views.

Example:
    >>> from dictkit.core import Dict
    >>> d = Dict([("a", 1)])
    >>> d["a"], d["b"]
    (1, MISSING)
"""

from dictkit.core._dict import UNSET, DefaultDict, Dict, StrictDict, build
from dictkit.core._immutable import (
    ImmutableMapping,
    ImmutableRecord,
    ImmutableSequence,
    ImmutableSet,
    immutable,
)
from dictkit.core._ordered_map import OrderedMap
from dictkit.core._types import MISSING, Entry, as_pair, validate_key

__all__ = [
    "MISSING",
    "UNSET",
    "DefaultDict",
    "Dict",
    "Entry",
    "ImmutableMapping",
    "ImmutableRecord",
    "ImmutableSequence",
    "ImmutableSet",
    "OrderedMap",
    "StrictDict",
    "as_pair",
    "build",
    "immutable",
    "validate_key",
]
