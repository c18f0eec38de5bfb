"""
Main CLI entry point for dictkit.

Provides a small command-line interface using Click for building ad-hoc
dicts from KEY=VALUE arguments, looking keys up under each variant's
miss policy, and rendering the result.
"""

import logging as _logging
import typing as _typing

import click as _click
import rich.console as _rich_console
import yaml as _yaml

import dictkit
import dictkit.config as config
import dictkit.construct as construct
import dictkit.core as core
import dictkit.errors as errors
import dictkit.render as render
import dictkit.transforms as transforms

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _parse_value(text: str) -> _typing.Any:
    """Parse a value with YAML scalar rules (null, numbers, booleans)."""
    try:
        return _yaml.safe_load(text)
    except _yaml.YAMLError:
        return text


def _parse_entries(assignments: tuple[str, ...]) -> list[tuple[str, _typing.Any]]:
    """Turn KEY=VALUE arguments into (key, value) pairs."""
    entries: list[tuple[str, _typing.Any]] = []
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep:
            raise _click.BadParameter(
                f"expected KEY=VALUE, got {assignment!r}", param_hint="ENTRIES"
            )
        entries.append((key, _parse_value(value)))
    return entries


def _fail(error: errors.DictError) -> _typing.NoReturn:
    """Report a library error and exit with status 1."""
    _click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(dictkit.__version__, "-v", "--version", prog_name="dictkit")
@_click.option(
    "--log-level",
    type=str,
    default=None,
    help="Logging level (default: settings.log_level)",
)
@_click.pass_context
def cli(ctx: _click.Context, log_level: str | None) -> None:
    """dictkit - ordered, string-keyed dictionaries.

    Build a dict from KEY=VALUE arguments and inspect it.
    Values are parsed as YAML scalars: null, 1, 2.5, true, text.
    """
    try:
        settings = config.get_settings()
    except errors.ConfigFileError as e:
        _fail(e)

    _logging.basicConfig(level=(log_level or settings.log_level).upper())
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@_click.argument("entries", nargs=-1)
@_click.option("--compact", is_flag=True, help="Drop entries whose value is null")
@_click.option("--invert", "invert_", is_flag=True, help="Swap keys and values")
@_click.option("--omit", "omit_keys", multiple=True, help="Key to leave out (repeatable)")
@_click.option("--table", is_flag=True, help="Render as a table")
@_click.option("--label", type=str, default=None, help="Dict label for messages")
def show(
    entries: tuple[str, ...],
    compact: bool,
    invert_: bool,
    omit_keys: tuple[str, ...],
    table: bool,
    label: str | None,
) -> None:
    """Build a dict from ENTRIES and print it."""
    try:
        d = core.build(_parse_entries(entries), label=label)
        if omit_keys:
            d = transforms.omit(d, *omit_keys)
        if compact:
            d = transforms.compact_dict(d)
        if invert_:
            d = transforms.invert(d)
    except errors.DictError as e:
        _fail(e)

    render.print_dict(d, _rich_console.Console(), table=table, title=label)


@cli.command()
@_click.argument("entries", nargs=-1)
@_click.option("--key", "-k", "keys", multiple=True, required=True, help="Key to look up")
@_click.option("--strict", is_flag=True, help="Fail when a key is missing")
@_click.option("--default", "default_text", type=str, default=None, help="Value for missing keys")
@_click.option("--label", type=str, default=None, help="Dict label for messages")
def get(
    entries: tuple[str, ...],
    keys: tuple[str, ...],
    strict: bool,
    default_text: str | None,
    label: str | None,
) -> None:
    """Look up one or more keys in a dict built from ENTRIES.

    One key prints its value; several keys print the selected entries.
    """
    default = core.UNSET if default_text is None else _parse_value(default_text)
    try:
        d = core.build(_parse_entries(entries), default=default, strict=strict, label=label)
        if len(keys) == 1:
            _click.echo(render.format_value(d[keys[0]]))
        else:
            selected = d.get_many(keys)
            if selected:
                _click.echo(render.format_dict(selected))
    except errors.DictError as e:
        _fail(e)


@cli.command(name="config")
@_click.pass_context
def config_cmd(ctx: _click.Context) -> None:
    """Show effective settings."""
    settings: config.Settings = ctx.obj["settings"]
    shown = construct.as_dict(settings, label="settings")
    _click.echo("dictkit Configuration:")
    _click.echo(render.format_dict(shown))


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="dictkit")


if __name__ == "__main__":
    main()
