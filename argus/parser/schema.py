# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentSchema`, the declarative description of a
program's command line.

A schema is three ordered lists of descriptors (required, optional and boolean
arguments) plus the lookup tables derived from them. It is built once, usually
at import time, and then drives both the parsing engine and the help renderer.

Key Features:
- Declarative registration via `add_required()`, `add_optional()`,
  `add_boolean()` or the `required=`/`optional=`/`boolean=` constructor lists
- Invariants checked at registration time (`SchemaError`): unique names,
  unique short options, unique long options, flags present on every option
- `make_default()` for a container populated with declared defaults
- `parse()` / `parse_or_exit()` delegating to the parsing engine
- `render_help()` / `print_help()` delegating to the help renderer

Example Usage:
    schema = ArgumentSchema()
    schema.add_required("input_file", label="input", description="Input file path")
    schema.add_required("output_file", label="output", description="Output file path")
    schema.add_optional(
        "threads", "uint", short="t", long="threads", default=1,
        description="Number of threads to use",
    )
    schema.add_boolean("help", short="h", long="help", description="Show help")

    args = schema.parse(["prog", "in.txt", "out.txt", "-t4"])
    # args == {'input_file': 'in.txt', 'output_file': 'out.txt', 'threads': 4, 'help': False}
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, NoReturn, Sequence

from rich.console import Console

from argus.exceptions import ParseError, SchemaError
from argus.logger import logger
from argus.parser.argument import (
    Argument,
    BooleanArgument,
    OptionalArgument,
    RequiredArgument,
)
from argus.parser.container import ParsedArguments
from argus.parser.engine import parse_args
from argus.parser.help import print_help, render_help, report_error
from argus.parser.value_parsers import ValueFormatter, ValueParser, ValueType


class ArgumentSchema:
    """
    Ordered set of argument descriptors describing one program's command line.

    Required arguments are matched positionally in the order they are added.
    Optional and boolean arguments may appear in any order after them.
    """

    def __init__(
        self,
        required: Iterable[RequiredArgument] = (),
        optional: Iterable[OptionalArgument] = (),
        boolean: Iterable[BooleanArgument] = (),
        program: str | None = None,
    ) -> None:
        self.program: str | None = program
        self._required: list[RequiredArgument] = []
        self._optional: list[OptionalArgument] = []
        self._boolean: list[BooleanArgument] = []
        self._names: set[str] = set()
        self._short_map: dict[str, OptionalArgument | BooleanArgument] = {}
        self._long_map: dict[str, OptionalArgument | BooleanArgument] = {}
        for argument in (*required, *optional, *boolean):
            self.add(argument)

    @property
    def required(self) -> tuple[RequiredArgument, ...]:
        return tuple(self._required)

    @property
    def optional(self) -> tuple[OptionalArgument, ...]:
        return tuple(self._optional)

    @property
    def boolean(self) -> tuple[BooleanArgument, ...]:
        return tuple(self._boolean)

    @property
    def arguments(self) -> tuple[Argument, ...]:
        """All descriptors: required, then optional, then boolean."""
        return (*self._required, *self._optional, *self._boolean)

    def _check_unique(self, argument: Argument) -> None:
        if argument.name in self._names:
            raise SchemaError(f"Argument name '{argument.name}' is already defined")
        if isinstance(argument, RequiredArgument):
            return
        if argument.short is not None and argument.short in self._short_map:
            existing = self._short_map[argument.short]
            raise SchemaError(
                f"Short option '-{argument.short}' is already used by argument "
                f"'{existing.name}'"
            )
        if argument.long is not None and argument.long in self._long_map:
            existing = self._long_map[argument.long]
            raise SchemaError(
                f"Long option '--{argument.long}' is already used by argument "
                f"'{existing.name}'"
            )

    def add(self, argument: Argument) -> Argument:
        """
        Register an already-built descriptor.

        Raises:
            SchemaError: If the descriptor breaks a schema invariant.
        """
        if not isinstance(argument, (RequiredArgument, OptionalArgument, BooleanArgument)):
            raise SchemaError(
                f"Expected an argument descriptor, got {type(argument).__name__}"
            )
        self._check_unique(argument)
        self._names.add(argument.name)
        if isinstance(argument, RequiredArgument):
            self._required.append(argument)
        else:
            if argument.short is not None:
                self._short_map[argument.short] = argument
            if argument.long is not None:
                self._long_map[argument.long] = argument
            if isinstance(argument, OptionalArgument):
                self._optional.append(argument)
            else:
                self._boolean.append(argument)
        logger.debug("Registered %s argument '%s'", argument.kind, argument.name)
        return argument

    def add_required(
        self,
        name: str,
        value_type: ValueType | str = "string",
        label: str | None = None,
        description: str = "",
        parser: ValueParser | None = None,
    ) -> RequiredArgument:
        """
        Define a required positional argument.

        Args:
            name (str): Key of the value in the parsed result.
            value_type (ValueType | str): Value type or registry name.
            label (str | None): Display name in help, defaults to `name`.
            description (str): Help text.
            parser (ValueParser | None): Custom parser for the value.
        """
        argument = RequiredArgument(
            name=name,
            value_type=value_type,
            label=label,
            description=description,
            parser=parser,
        )
        self.add(argument)
        return argument

    def add_optional(
        self,
        name: str,
        value_type: ValueType | str = "string",
        short: str | None = None,
        long: str | None = None,
        arg_label: str | None = None,
        default: Any = None,
        description: str = "",
        formatter: ValueFormatter | None = None,
        parser: ValueParser | None = None,
        precision: int | None = None,
    ) -> OptionalArgument:
        """
        Define an optional argument taking one value.

        Args:
            name (str): Key of the value in the parsed result.
            value_type (ValueType | str): Value type or registry name.
            short (str | None): Single-character short option.
            long (str | None): Long option, without the leading dashes.
            arg_label (str | None): Value placeholder in help, defaults to `name`.
            default (Any): Value used when the option is absent.
            description (str): Help text.
            formatter (ValueFormatter | None): Renders the default in help.
            parser (ValueParser | None): Custom parser for the value.
            precision (int | None): Significant digits shown for float defaults.
        """
        argument = OptionalArgument(
            name=name,
            value_type=value_type,
            short=short,
            long=long,
            arg_label=arg_label,
            default=default,
            description=description,
            formatter=formatter,
            parser=parser,
            precision=precision,
        )
        self.add(argument)
        return argument

    def add_boolean(
        self,
        name: str,
        short: str | None = None,
        long: str | None = None,
        description: str = "",
    ) -> BooleanArgument:
        """
        Define a boolean switch. It is False unless its flag is given.

        Args:
            name (str): Key of the value in the parsed result.
            short (str | None): Single-character short option.
            long (str | None): Long option, without the leading dashes.
            description (str): Help text.
        """
        argument = BooleanArgument(
            name=name, short=short, long=long, description=description
        )
        self.add(argument)
        return argument

    def get_argument(self, name: str) -> Argument | None:
        """Return the descriptor registered under `name`, if any."""
        return next((arg for arg in self.arguments if arg.name == name), None)

    def find_short(self, flag: str) -> OptionalArgument | BooleanArgument | None:
        return self._short_map.get(flag)

    def find_long(self, flag: str) -> OptionalArgument | BooleanArgument | None:
        return self._long_map.get(flag)

    def long_options(self) -> list[str]:
        return list(self._long_map)

    def make_default(self) -> ParsedArguments:
        """
        Build a container with every field at its starting value.

        Optional fields hold their declared default, booleans hold False and
        required fields hold their value type's zero value until a parse fills them.
        """
        values: dict[str, Any] = {}
        for required in self._required:
            values[required.name] = required.zero
        for optional in self._optional:
            values[optional.name] = optional.default
        for boolean in self._boolean:
            values[boolean.name] = False
        return ParsedArguments(values)

    def parse(
        self, argv: Sequence[str], container: ParsedArguments | None = None
    ) -> ParsedArguments:
        """
        Parse `argv` (program alias first) against this schema.

        Args:
            argv (Sequence[str]): Argument vector; `argv[0]` is never parsed.
            container (ParsedArguments | None): Container to fill in place.
                A fresh default container is created when omitted.

        Returns:
            ParsedArguments: The populated container.

        Raises:
            ParseError: On the first invalid token. The container is left untouched.
        """
        if container is None:
            container = self.make_default()
        parse_args(self, argv, container)
        return container

    def render_help(self, program: str | None = None) -> str:
        """Return the help text as plain text."""
        return render_help(self, program or self.program or "")

    def print_help(self, program: str | None = None, console: Console | None = None) -> None:
        """Print the help text to a rich console."""
        print_help(self, program or self.program or "", console=console)

    def parse_or_exit(
        self,
        argv: Sequence[str] | None = None,
        help_flag: str | None = "help",
        console: Console | None = None,
    ) -> ParsedArguments:
        """
        Parse `argv`, or print help and exit with status 1.

        Help is shown when parsing fails (after a one-line error) or when the
        boolean argument named `help_flag` was set.
        """
        if argv is None:
            argv = sys.argv
        program = argv[0] if argv else self.program or ""
        try:
            args = self.parse(argv)
        except ParseError as error:
            report_error(error, console=console)
            self._exit_with_help(program, console)
        if help_flag is not None and args.get(help_flag):
            self._exit_with_help(program, console)
        return args

    def _exit_with_help(self, program: str, console: Console | None) -> NoReturn:
        self.print_help(program, console=console)
        sys.exit(1)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentSchema):
            return False
        return self.arguments == other.arguments

    def __hash__(self) -> int:
        return hash(tuple(arg.name for arg in self.arguments))

    def __str__(self) -> str:
        """Return a human-readable summary of the schema."""
        return (
            f"ArgumentSchema(required={len(self._required)}, "
            f"optional={len(self._optional)}, boolean={len(self._boolean)}, "
            f"short={len(self._short_map)}, long={len(self._long_map)})"
        )

    def __repr__(self) -> str:
        return str(self)
