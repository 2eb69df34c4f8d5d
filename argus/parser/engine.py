# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The parsing engine: turns an argument vector into container values.

Parsing runs in two phases over `argv[1:]`:

1. Required arguments. Each required descriptor takes exactly one token, in
   declared order, with no flag syntax. The parser always advances past the
   whole token, whatever it reports as consumed (`4x` for an `int` is 4).
2. Options. The remaining tokens are matched in any order against
   - exact long options (`--threads 4`, `--verbose`), whose value is always
     the next token and must be consumed whole;
   - short option clusters (`-vx`, `-t4`, `-vxt4`), scanned left to right:
     boolean short options first, then value options, whose value is the rest
     of the same token. A value parser may stop early, in which case scanning
     resumes where it stopped (`-t4v`). A bare `-` is an empty cluster.

The first problem raises a `ParseError`. Values are collected in a scratch
mapping and committed into the container only when the whole vector parsed, so
a failed parse never leaves a half-filled container behind.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from argus.exceptions import (
    InvalidValue,
    MissingRequiredArgument,
    OptionRequiresValue,
    ParseError,
    TrailingUnparsedInput,
    UnexpectedPositionalArgument,
    UnknownFlag,
)
from argus.logger import logger
from argus.parser.argument import OptionalArgument, RequiredArgument
from argus.parser.container import ParsedArguments

if TYPE_CHECKING:
    from argus.parser.schema import ArgumentSchema

FLAG_PREFIX = "-"
LONG_PREFIX = "--"


def _apply_parser(
    argument: RequiredArgument | OptionalArgument, text: str
) -> tuple[Any, int | None]:
    try:
        return argument.parse_value(text)
    except ValueError as error:
        raise InvalidValue(argument.name, text, str(error)) from error


def _consume_required(
    schema: ArgumentSchema, tokens: Sequence[str], result: dict[str, Any]
) -> int:
    """Parse the positional tokens and return how many were used."""
    required = schema.required
    if len(tokens) < len(required):
        missing = required[len(tokens)]
        raise MissingRequiredArgument(
            missing.name, missing.label or missing.name, len(required), len(tokens)
        )
    for argument, token in zip(required, tokens):
        result[argument.name], _ = _apply_parser(argument, token)
    return len(required)


def _handle_long_option(
    schema: ArgumentSchema,
    tokens: Sequence[str],
    index: int,
    result: dict[str, Any],
) -> int:
    """Handle an exact `--long` match at `tokens[index]` and return the next index."""
    token = tokens[index]
    argument = schema.find_long(token[len(LONG_PREFIX) :])
    assert argument is not None, "caller checked the long option exists"
    if not isinstance(argument, OptionalArgument):
        result[argument.name] = True
        return index + 1
    if index + 1 >= len(tokens):
        raise OptionRequiresValue(token)
    text = tokens[index + 1]
    value, consumed = _apply_parser(argument, text)
    if consumed is not None and consumed < len(text):
        raise TrailingUnparsedInput(token, text)
    result[argument.name] = value
    return index + 2


def _scan_cluster(schema: ArgumentSchema, token: str, result: dict[str, Any]) -> None:
    """Walk a short option cluster such as `-vxt4`."""
    cluster = token[len(FLAG_PREFIX) :]
    position = 0
    while position < len(cluster):
        flag = cluster[position]
        argument = schema.find_short(flag)
        if argument is None:
            raise UnknownFlag(flag, token)
        if not isinstance(argument, OptionalArgument):
            result[argument.name] = True
            position += 1
            continue
        remainder = cluster[position + 1 :]
        if not remainder:
            raise OptionRequiresValue(f"{FLAG_PREFIX}{flag}")
        value, consumed = _apply_parser(argument, remainder)
        result[argument.name] = value
        if consumed is None or consumed >= len(remainder):
            return
        position += 1 + consumed


def _unknown_long_option(schema: ArgumentSchema, token: str) -> UnknownFlag:
    prefix = token[len(LONG_PREFIX) :]
    suggestions = [
        f"{LONG_PREFIX}{name}"
        for name in schema.long_options()
        if prefix and name.startswith(prefix)
    ]
    return UnknownFlag(FLAG_PREFIX, token, suggestions)


def _consume_options(
    schema: ArgumentSchema, tokens: Sequence[str], result: dict[str, Any]
) -> None:
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.startswith(LONG_PREFIX) and schema.find_long(
            token[len(LONG_PREFIX) :]
        ):
            index = _handle_long_option(schema, tokens, index, result)
        elif token.startswith(LONG_PREFIX):
            raise _unknown_long_option(schema, token)
        elif token.startswith(FLAG_PREFIX):
            _scan_cluster(schema, token, result)
            index += 1
        else:
            raise UnexpectedPositionalArgument(token)


def parse_args(
    schema: ArgumentSchema, argv: Sequence[str], container: ParsedArguments
) -> ParsedArguments:
    """
    Parse `argv` against `schema` and store the values in `container`.

    Args:
        schema (ArgumentSchema): The declared arguments.
        argv (Sequence[str]): Argument vector. `argv[0]` is the program alias and
            is skipped.
        container (ParsedArguments): Destination, usually from `make_default()`.

    Returns:
        ParsedArguments: The same container, populated.

    Raises:
        ParseError: The first problem found. `container` is not modified.
    """
    if isinstance(argv, str):
        raise TypeError("argv must be a sequence of strings, not a string")
    tokens = list(argv[1:])
    logger.debug("Parsing %d token(s) against %s", len(tokens), schema)
    result: dict[str, Any] = {}
    try:
        used = _consume_required(schema, tokens, result)
        _consume_options(schema, tokens[used:], result)
    except ParseError as error:
        logger.debug("Parse failed: %s", error)
        raise
    container.update_from(result)
    logger.debug("Parsed arguments: %s", result)
    return container
