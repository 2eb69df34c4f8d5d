"""
Argus Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line front end: parse arguments against a schema file.

    argus <schema> [-p<program>] [-j] [-d] [-v] [-h] -- ARGS...
"""

import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Sequence

from rich.markup import escape
from rich.table import Table

from argus.config import load_schema
from argus.console import console
from argus.exceptions import ConfigError, ParseError
from argus.parser import ArgumentSchema, ParsedArguments, report_error
from argus.utils import setup_logging

SEPARATOR = "--"
HELP_TOKENS = {"-h", "--help"}
EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def get_cli_schema() -> ArgumentSchema:
    """Build the schema of the `argus` command itself."""
    schema = ArgumentSchema(program="argus")
    schema.add_required(
        "schema_file", label="schema", description="YAML or TOML schema file"
    )
    schema.add_optional(
        "program",
        short="p",
        long="program",
        arg_label="program",
        default="",
        description="Program alias shown in help",
    )
    schema.add_boolean(
        "as_json", short="j", long="json", description="Print parsed values as JSON"
    )
    schema.add_boolean(
        "describe", short="d", long="describe", description="Print the schema's help"
    )
    schema.add_boolean(
        "verbose", short="v", long="verbose", description="Enable debug logging"
    )
    schema.add_boolean("help", short="h", long="help", description="Show this help message")
    return schema


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split `argv` at the first `--` into front end and target arguments."""
    argv = list(argv)
    if SEPARATOR in argv:
        index = argv.index(SEPARATOR)
        return argv[:index], argv[index + 1 :]
    return argv, []


def render_values(schema: ArgumentSchema, values: ParsedArguments) -> Table:
    table = Table(title=schema.program or None, show_lines=False)
    table.add_column("Argument", style="bold")
    table.add_column("Kind")
    table.add_column("Value")
    for argument in schema.arguments:
        table.add_row(
            escape(argument.name),
            str(argument.kind),
            escape(repr(values[argument.name])),
        )
    return table


def _json_default(value: Any) -> str:
    return str(value)


def main(argv: Sequence[str] | None = None) -> NoReturn:
    own_argv, target_tokens = split_argv(sys.argv if argv is None else argv)
    cli = get_cli_schema()
    cli_program = Path(own_argv[0]).name if own_argv else "argus"
    try:
        options = cli.parse(own_argv)
    except ParseError as error:
        if HELP_TOKENS.intersection(own_argv[1:]):
            cli.print_help(cli_program)
            sys.exit(EXIT_OK)
        report_error(error)
        cli.print_help(cli_program)
        sys.exit(EXIT_PARSE_ERROR)
    if options.help:
        cli.print_help(cli_program)
        sys.exit(EXIT_OK)
    if options.verbose:
        setup_logging(logging.DEBUG)

    try:
        schema = load_schema(options.schema_file)
    except ConfigError as error:
        report_error(error)
        sys.exit(EXIT_CONFIG_ERROR)

    program = options.program or schema.program or ""
    if options.describe:
        schema.print_help(program)
        sys.exit(EXIT_OK)

    try:
        values = schema.parse([program, *target_tokens])
    except ParseError as error:
        report_error(error)
        schema.print_help(program)
        sys.exit(EXIT_PARSE_ERROR)

    if options.as_json:
        console.print_json(data=values.as_dict(), default=_json_default)
    else:
        console.print(render_values(schema, values))
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
