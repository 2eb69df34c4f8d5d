# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argus.

Schema construction problems are programming mistakes and surface as
`SchemaError` as soon as a descriptor is registered. Parse-time problems are
user input errors and surface as subclasses of `ParseError`, each carrying the
structured details needed to print a single diagnostic line.

All exceptions inherit from `ArgusError`, the base exception for the package.

Exception Hierarchy:
- ArgusError
    ├── SchemaError
    ├── ConfigError
    ├── MalformedNumber (also a ValueError)
    └── ParseError
        ├── MissingRequiredArgument
        ├── InvalidValue
        ├── OptionRequiresValue
        ├── TrailingUnparsedInput
        ├── UnknownFlag
        └── UnexpectedPositionalArgument
"""
from __future__ import annotations


class ArgusError(Exception):
    """Base exception for argus."""


class SchemaError(ArgusError):
    """Exception raised when an argument schema violates one of its invariants."""


class ConfigError(ArgusError):
    """Exception raised when a schema file cannot be read or validated."""


class MalformedNumber(ArgusError, ValueError):
    """Exception raised by the numeric value parsers on format or range errors."""

    def __init__(self, text: str, type_name: str, reason: str = "") -> None:
        self.text = text
        self.type_name = type_name
        self.reason = reason
        message = f"failed to parse '{text}' as {type_name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParseError(ArgusError):
    """Base class for errors raised while parsing an argument vector."""


class MissingRequiredArgument(ParseError):
    """Fewer positional tokens than required arguments."""

    def __init__(self, argument: str, label: str, expected: int, received: int) -> None:
        self.argument = argument
        self.label = label
        self.expected = expected
        self.received = received
        super().__init__(
            f"Not all required arguments included: missing <{label}> "
            f"(expected {expected}, got {received})"
        )


class InvalidValue(ParseError):
    """A value parser rejected the text given for an argument."""

    def __init__(self, argument: str, raw_text: str, reason: str = "") -> None:
        self.argument = argument
        self.raw_text = raw_text
        self.reason = reason
        message = f"Invalid value '{raw_text}' for '{argument}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class OptionRequiresValue(ParseError):
    """A value-taking option was given without a value."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Option '{option}' requires a value")


class TrailingUnparsedInput(ParseError):
    """A value parser did not consume an entire long option value."""

    def __init__(self, option: str, raw_text: str) -> None:
        self.option = option
        self.raw_text = raw_text
        super().__init__(f"Couldn't parse argument '{raw_text}' for option '{option}'")


class UnknownFlag(ParseError):
    """A flag matches no declared option."""

    def __init__(self, flag: str, token: str, suggestions: list[str] | None = None) -> None:
        self.flag = flag
        self.token = token
        self.suggestions = suggestions or []
        if token.startswith("--"):
            message = f"Unrecognized option '{token}'"
        else:
            message = f"Invalid flag '-{flag}' in '{token}'"
        if self.suggestions:
            message = f"{message}. Did you mean one of: {', '.join(self.suggestions)}?"
        super().__init__(message)


class UnexpectedPositionalArgument(ParseError):
    """A token that is neither a recognized option nor an expected positional."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid argument '{token}'")
