#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/tidyconf/cli.py
"""Command-line interface for inspecting and converting configuration files.

Examples
--------
List every settable option::

    $ tidyconf list --category print

Show the effective non-default values::

    $ tidyconf show ~/.tidyrc

Check a file and report problems::

    $ tidyconf check site.tidyrc --encoding utf8

Convert a YAML configuration to the native format::

    $ tidyconf convert .tidyconf.yaml --out .tidyrc

"""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from typing import Optional, get_args

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tidyconf import __version__
from tidyconf.config import TidyConfig
from tidyconf.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE_ENCODING,
    LogLevelName,
    OptionCategory,
    OptionId,
    OptionType,
    ShowFormat,
)
from tidyconf.encodings import python_codec
from tidyconf.exceptions import ConfigFileError, ConfigWriteError
from tidyconf.logging_utils import configure_logging
from tidyconf.mapping import load_config, load_config_with_priority
from tidyconf.picklists import DOCTYPE_PICKS
from tidyconf.registry import OPTION_DEFS, OptionDescriptor, iter_options, iter_pick_labels
from tidyconf.snapshot import value_eq_default
from tidyconf.writer import doctype_is_default

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_WARNINGS = 1
EXIT_FILE_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="tidyconf",
        description="Inspect, validate and convert HTML tidy style configuration files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=get_args(LogLevelName),
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose logging with timestamps and logger names")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    list_parser = subparsers.add_parser("list", help="List all settable options")
    list_parser.add_argument(
        "--category",
        choices=[category.value for category in OptionCategory],
        help="Only list options of this category",
    )

    show_parser = subparsers.add_parser("show", help="Show effective option values")
    show_parser.add_argument(
        "config",
        nargs="?",
        help=f"Configuration file (default: ${CONFIG_ENV_VAR} or auto-discovered)",
    )
    show_parser.add_argument("--all", action="store_true", help="Include options at their default value")
    show_parser.add_argument(
        "--format",
        choices=get_args(ShowFormat),
        default="table",
        help="Output as a table or in the native configuration format (default: table)",
    )

    check_parser = subparsers.add_parser("check", help="Parse a configuration file and report problems")
    check_parser.add_argument("config", help="Configuration file to check")
    check_parser.add_argument(
        "--encoding",
        default=DEFAULT_CONFIG_FILE_ENCODING,
        help=f"Character encoding of a native configuration file (default: {DEFAULT_CONFIG_FILE_ENCODING})",
    )

    convert_parser = subparsers.add_parser("convert", help="Save any supported configuration in the native format")
    convert_parser.add_argument("config", help="Configuration file to convert")
    convert_parser.add_argument("--out", required=True, help="Destination of the native configuration file")
    convert_parser.add_argument(
        "--encoding",
        default=DEFAULT_CONFIG_FILE_ENCODING,
        help=f"Character encoding of a native source file (default: {DEFAULT_CONFIG_FILE_ENCODING})",
    )

    return parser


def _default_label(option: OptionDescriptor) -> str:
    if option.id == OptionId.DOCTYPE:
        return DOCTYPE_PICKS.label_for(OPTION_DEFS[OptionId.DOCTYPE_MODE].default) or ""
    if option.is_string:
        return str(option.default or "")
    number = int(option.default or 0)
    if option.pick_list is not None:
        return option.pick_list.label_for(number) or str(number)
    if option.type is OptionType.BOOLEAN:
        return "yes" if number else "no"
    return str(number)


def _accepted_values(option: OptionDescriptor) -> str:
    if option.pick_list is not None:
        return ", ".join(iter_pick_labels(option))
    if option.type is OptionType.INTEGER:
        return "integer"
    return "string"


def handle_list_command(parsed_args: argparse.Namespace, console: Console) -> int:
    """Print a table of every option that can be set from a configuration file."""
    category = OptionCategory(parsed_args.category) if parsed_args.category else None
    options = [option for option in iter_options(category) if option.settable]

    table = Table(title=f"tidyconf options ({len(options)})")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Category", style="blue")
    table.add_column("Type", style="magenta")
    table.add_column("Default", style="yellow")
    table.add_column("Values", style="white")

    for option in options:
        table.add_row(
            option.name,
            option.category.value,
            option.type.value,
            _default_label(option),
            _accepted_values(option),
        )

    console.print(table)
    return EXIT_SUCCESS


def _print_diagnostics(config: TidyConfig, console: Console) -> None:
    for message in config.diagnostics.messages:
        console.print(escape(message.text), style="yellow")


def _native_text(config: TidyConfig) -> str:
    buffer = io.BytesIO()
    config.save_sink(buffer)
    codec = python_codec(config.get_int(OptionId.OUT_CHAR_ENCODING))
    return buffer.getvalue().decode(codec, errors="replace")


def handle_show_command(parsed_args: argparse.Namespace, console: Console) -> int:
    """Print the effective option values of a configuration."""
    try:
        if parsed_args.config:
            config = load_config(parsed_args.config)
            source = parsed_args.config
        else:
            config, found = load_config_with_priority(env_var_path=os.environ.get(CONFIG_ENV_VAR))
            source = str(found) if found else None
    except ConfigFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if parsed_args.format == "native":
        sys.stdout.write(_native_text(config))
        return EXIT_SUCCESS

    title = f"Effective configuration ({source})" if source else "Effective configuration (defaults)"
    table = Table(title=title)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_column("Default", style="yellow")

    for option in iter_options():
        if not option.settable:
            continue
        if option.id == OptionId.DOCTYPE:
            changed = not doctype_is_default(config)
        else:
            changed = not value_eq_default(option, config.values[option.id])
        if not (changed or parsed_args.all):
            continue
        table.add_row(option.name, escape(config.value_label(option.id)), _default_label(option))

    console.print(table)
    _print_diagnostics(config, console)
    return EXIT_SUCCESS


def handle_check_command(parsed_args: argparse.Namespace, console: Console) -> int:
    """Parse a configuration file and report its diagnostics.

    Returns
    -------
    int
        0 for a clean file, 1 if warnings were recorded, 2 if the file
        could not be read at all

    """
    try:
        config = load_config(parsed_args.config, encoding=parsed_args.encoding)
    except ConfigFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if config.option_errors:
        _print_diagnostics(config, console)
        console.print(f"[red]{escape(parsed_args.config)}: {config.option_errors} problem(s) found[/red]")
        return EXIT_WARNINGS

    console.print(f"[green]{escape(parsed_args.config)}: OK[/green]")
    return EXIT_SUCCESS


def handle_convert_command(parsed_args: argparse.Namespace, console: Console) -> int:
    """Load any supported configuration and save it in the native format."""
    try:
        config = load_config(parsed_args.config, encoding=parsed_args.encoding)
    except ConfigFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    _print_diagnostics(config, console)
    try:
        rc = config.save_file(parsed_args.out)
    except ConfigWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    if rc != 0:
        print(f"Error: could not write every option to {parsed_args.out}", file=sys.stderr)
        return EXIT_WARNINGS

    console.print(f"Configuration written to {parsed_args.out}")
    return EXIT_WARNINGS if config.option_errors else EXIT_SUCCESS


_HANDLERS = {
    "list": handle_list_command,
    "show": handle_show_command,
    "check": handle_check_command,
    "convert": handle_convert_command,
}


def main(args: Optional[list[str]] = None) -> int:
    """Execute the tidyconf command line."""
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)
    logger.debug("Running command %s", parsed_args.command)

    console = Console(highlight=False)
    return _HANDLERS[parsed_args.command](parsed_args, console)
