"""
dictkit - ordered, string-keyed dictionaries

Dicts with unique non-empty string keys, None stored as a real value,
and default, strict and immutable variants, plus pure transforms
(extend, defaults, invert, map/keep/discard/compact, equals).
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("dictkit")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "dictkit Contributors"

from dictkit.config import Settings, get_settings  # noqa: E402
from dictkit.construct import (  # noqa: E402
    as_dict,
    default_dict,
    dictionary,
    immutable_dict,
    make_dict,
    strict_dict,
    with_default,
    with_strict,
)
from dictkit.core import (  # noqa: E402
    MISSING,
    DefaultDict,
    Dict,
    Entry,
    ImmutableMapping,
    ImmutableRecord,
    ImmutableSequence,
    ImmutableSet,
    OrderedMap,
    StrictDict,
    immutable,
)
from dictkit.errors import (  # noqa: E402
    AttributeNotFoundError,
    ConfigFileError,
    ConfigurationError,
    DictError,
    ImmutableMutationError,
    InvalidKeyError,
    KeyNotFoundError,
    LengthMismatchError,
)
from dictkit.render import format_dict, print_dict, to_table  # noqa: E402
from dictkit.transforms import (  # noqa: E402
    compact_dict,
    defaults,
    discard_dict,
    entries,
    entry,
    equals,
    extend,
    has,
    invert,
    keep_dict,
    keys,
    map_dict,
    omit,
    values,
)

__all__ = [
    "__version__",
    "__version_info__",
    "MISSING",
    "AttributeNotFoundError",
    "ConfigFileError",
    "ConfigurationError",
    "DefaultDict",
    "Dict",
    "DictError",
    "Entry",
    "ImmutableMapping",
    "ImmutableMutationError",
    "ImmutableRecord",
    "ImmutableSequence",
    "ImmutableSet",
    "InvalidKeyError",
    "KeyNotFoundError",
    "LengthMismatchError",
    "OrderedMap",
    "Settings",
    "StrictDict",
    "as_dict",
    "compact_dict",
    "default_dict",
    "defaults",
    "dictionary",
    "discard_dict",
    "entries",
    "entry",
    "equals",
    "extend",
    "format_dict",
    "get_settings",
    "has",
    "immutable",
    "immutable_dict",
    "invert",
    "keep_dict",
    "keys",
    "make_dict",
    "map_dict",
    "omit",
    "print_dict",
    "strict_dict",
    "to_table",
    "values",
    "with_default",
    "with_strict",
]
