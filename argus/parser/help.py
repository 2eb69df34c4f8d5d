# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help and diagnostic rendering for argus schemas.

The help text has three parts:

    USAGE:
        prog <input> <output> [-t<threads>] [-h]

    ARGUMENTS:
        <input>                  Input file path
        <output>                 Output file path

    OPTIONS:
        -t, --threads <threads>  Number of threads to use (default: 1)
        -h, --help               Show help

The usage line lists required labels when there are at most three of them and
the short forms of options when there are at most three of those, otherwise a
placeholder. The left column is padded to the widest label of both blocks so
all descriptions line up.

`build_help` returns a styled `rich.text.Text`, `render_help` the same as plain
text and `print_help` writes it to a console.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from argus.console import console as default_console
from argus.console import error_console
from argus.exceptions import ArgusError
from argus.parser.argument import Argument, OptionalArgument

if TYPE_CHECKING:
    from argus.parser.schema import ArgumentSchema

USAGE_SUMMARY_LIMIT = 3
INDENT = "    "
GAP = "  "
HEADING_STYLE = "bold"


def get_usage(schema: ArgumentSchema, program: str) -> str:
    """Return the usage line (without indentation) for `schema`."""
    parts = [program] if program else []
    required = schema.required
    if 0 < len(required) <= USAGE_SUMMARY_LIMIT:
        parts.extend(arg.get_usage_text() for arg in required)
    elif required:
        parts.append("<ARGUMENTS>")
    options = (*schema.optional, *schema.boolean)
    if 0 < len(options) <= USAGE_SUMMARY_LIMIT:
        parts.extend(arg.get_usage_text() for arg in options)
    elif options:
        parts.append("[OPTIONS]")
    return " ".join(parts)


def get_label_width(schema: ArgumentSchema) -> int:
    """Return the widest left-column label across both help blocks."""
    return max((len(arg.get_help_label()) for arg in schema.arguments), default=0)


def _help_row(argument: Argument, width: int) -> str:
    description = argument.description
    if isinstance(argument, OptionalArgument):
        default = f"(default: {argument.format_default()})"
        description = f"{description} {default}" if description else default
    row = f"{INDENT}{argument.get_help_label():<{width}}{GAP}{description}"
    return row.rstrip()


def build_help(schema: ArgumentSchema, program: str) -> Text:
    """Build the styled help text for `schema`."""
    width = get_label_width(schema)
    text = Text()
    text.append("USAGE:", style=HEADING_STYLE)
    text.append(f"\n{INDENT}{get_usage(schema, program)}".rstrip() + "\n")
    if schema.required:
        text.append("\n")
        text.append("ARGUMENTS:", style=HEADING_STYLE)
        for argument in schema.required:
            text.append(f"\n{_help_row(argument, width)}")
        text.append("\n")
    if schema.optional or schema.boolean:
        text.append("\n")
        text.append("OPTIONS:", style=HEADING_STYLE)
        for option in (*schema.optional, *schema.boolean):
            text.append(f"\n{_help_row(option, width)}")
        text.append("\n")
    return text


def render_help(schema: ArgumentSchema, program: str) -> str:
    """Return the help text for `schema` as plain text."""
    return build_help(schema, program).plain


def print_help(
    schema: ArgumentSchema, program: str, console: Console | None = None
) -> None:
    """Print the help text for `schema` to `console`."""
    console = console or default_console
    console.print(build_help(schema, program), end="", soft_wrap=True)


def report_error(error: ArgusError, console: Console | None = None) -> None:
    """Print a one-line diagnostic for a parse or configuration error."""
    console = console or error_console
    line = Text()
    line.append("Error:", style="bold red")
    line.append(f" {error}")
    console.print(line, soft_wrap=True)
