"""
Text and rich renderings of dicts.

format_dict() produces one line per entry with keys right-aligned to the
widest key. to_table() and print_dict() render through rich for terminal
display.
"""

import collections.abc as _abc
import typing as _typing

import rich.console as _rich_console
import rich.table as _rich_table

import dictkit.config as config
import dictkit.constants as constants


def format_value(value: _typing.Any, *, null_repr: str | None = None) -> str:
    """
    Format one value for display.

    None shows as the configured null text, strings as-is, anything else
    via repr().
    """
    if value is None:
        return null_repr if null_repr is not None else config.get_settings().null_repr
    if isinstance(value, str):
        return value
    return repr(value)


def format_dict(
    d: _abc.Mapping[str, _typing.Any],
    *,
    null_repr: str | None = None,
    separator: str | None = None,
) -> str:
    """
    Render a dict as aligned text, one entry per line.

    Args:
        d: Dict (or any string-keyed mapping) to render.
        null_repr: Text for None values. Defaults to settings.null_repr.
        separator: Text between key and value. Defaults to settings.separator.

    Returns:
        n lines for n entries, joined with newlines. An empty dict renders
        as an empty string.

    Example:
        >>> print(format_dict(dictionary(a=1, long_name=None)))
                a : 1
        long_name : NULL
    """
    settings = config.get_settings()
    if null_repr is None:
        null_repr = settings.null_repr
    if separator is None:
        separator = settings.separator

    keys = list(d)
    if not keys:
        return ""

    width = max(len(key) for key in keys)
    return "\n".join(
        f"{key:>{width}}{separator}{format_value(d[key], null_repr=null_repr)}" for key in keys
    )


def to_table(
    d: _abc.Mapping[str, _typing.Any],
    *,
    title: str | None = None,
) -> _rich_table.Table:
    """
    Build a two-column rich Table for a dict.

    Keys are right-justified like format_dict().
    """
    table = _rich_table.Table(
        title=title,
        caption=constants.EMPTY_DICT_TITLE if not d else None,
        show_header=True,
        header_style="bold",
    )
    table.add_column("key", justify="right", style="cyan", no_wrap=True)
    table.add_column("value", justify="left")
    for key in d:
        table.add_row(key, format_value(d[key]))
    return table


def print_dict(
    d: _abc.Mapping[str, _typing.Any],
    console: _rich_console.Console | None = None,
    *,
    table: bool = False,
    title: str | None = None,
) -> None:
    """
    Print a dict to a rich console.

    Args:
        d: Dict to print.
        console: Console to print to (default: a new stdout console).
        table: If True, print a table instead of aligned text.
        title: Table title (ignored for aligned text).
    """
    console = console or _rich_console.Console()
    if table:
        console.print(to_table(d, title=title))
    else:
        # markup=False so brackets in values are printed literally
        console.print(format_dict(d), markup=False, highlight=False)
