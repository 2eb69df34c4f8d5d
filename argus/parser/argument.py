# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the descriptor dataclasses an `ArgumentSchema` is built from.

Each descriptor describes one command-line input: its identity (`name`, the key
in the parsed result), its display metadata (labels and description) and, for
flag-introduced arguments, its short and/or long option identifiers.

Descriptors:
- `RequiredArgument`: positional, consumes exactly one token in declared order.
- `OptionalArgument`: `-s<value>` / `--long <value>`, with a default.
- `BooleanArgument`: `-s` / `--long` switch, default False.

Descriptors validate their own shape on construction (identifier names,
single-character short options, at least one of short/long for flags) and raise
`SchemaError` when it is wrong. Cross-descriptor uniqueness is checked by the
schema they are added to.
"""
from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import Any, ClassVar

from argus.exceptions import SchemaError
from argus.parser.argument_kind import ArgumentKind
from argus.parser.value_parsers import (
    ParseResult,
    ValueFormatter,
    ValueParser,
    ValueType,
    float_formatter,
    value_types,
)


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not name.isidentifier():
        raise SchemaError(
            f"Argument name {name!r} must be a valid identifier "
            "(letters, digits, and underscores only)"
        )
    if keyword.iskeyword(name):
        raise SchemaError(f"Argument name '{name}' is a Python keyword")
    if name.startswith("_"):
        raise SchemaError(f"Argument name '{name}' must not start with an underscore")


def _validate_flags(name: str, short: str | None, long: str | None) -> None:
    if short is None and long is None:
        raise SchemaError(f"Argument '{name}' needs a short option, a long option, or both")
    if short is not None:
        if not isinstance(short, str) or len(short) != 1:
            raise SchemaError(
                f"Short option {short!r} of '{name}' must be a single character"
            )
        if short == "-" or short.isspace():
            raise SchemaError(f"Short option {short!r} of '{name}' is not allowed")
    if long is not None:
        if not isinstance(long, str) or not long:
            raise SchemaError(f"Long option {long!r} of '{name}' must be a non-empty string")
        if long.startswith("-"):
            raise SchemaError(
                f"Long option '{long}' of '{name}' must be given without leading dashes"
            )
        if any(char.isspace() for char in long) or "=" in long:
            raise SchemaError(
                f"Long option '{long}' of '{name}' must not contain whitespace or '='"
            )


def _flags_text(short: str | None, long: str | None) -> str:
    return ", ".join(flag for flag in _flags(short, long))


def _flags(short: str | None, long: str | None) -> tuple[str, ...]:
    flags = []
    if short is not None:
        flags.append(f"-{short}")
    if long is not None:
        flags.append(f"--{long}")
    return tuple(flags)


class _ValueArgument:
    """Shared behavior of descriptors that carry a parsed value."""

    name: str
    parser: ValueParser

    def parse_value(self, text: str) -> ParseResult:
        """
        Run this argument's parser over `text`.

        Returns:
            tuple[Any, int | None]: The value and how many characters were consumed.

        Raises:
            ValueError: If the parser rejects the text.
            SchemaError: If the parser does not honor the `(value, consumed)` contract.
        """
        result = self.parser(text)
        if not isinstance(result, tuple) or len(result) != 2:
            raise SchemaError(
                f"Parser for '{self.name}' must return a (value, consumed) tuple, "
                f"got {result!r}"
            )
        value, consumed = result
        if consumed is not None and (not isinstance(consumed, int) or consumed < 0):
            raise SchemaError(
                f"Parser for '{self.name}' reported an invalid consumed count {consumed!r}"
            )
        return value, consumed


@dataclass(frozen=True)
class RequiredArgument(_ValueArgument):
    """
    A positional argument that must be present.

    Attributes:
        name (str): Key of the value in the parsed result.
        value_type (ValueType | str): Value type or registry name (default "string").
        label (str | None): Display name in help, defaults to `name`.
        description (str): Help text.
        parser (ValueParser | None): Custom parser, defaults to the value type's.
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.REQUIRED

    name: str
    value_type: ValueType | str = "string"
    label: str | None = None
    description: str = ""
    parser: ValueParser | None = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _validate_name(self.name)
        value_type = value_types.resolve(self.value_type)
        object.__setattr__(self, "value_type", value_type)
        if self.label is None:
            object.__setattr__(self, "label", self.name)
        if self.parser is None:
            object.__setattr__(self, "parser", value_type.parser)
        elif not callable(self.parser):
            raise SchemaError(f"Parser for '{self.name}' is not callable")

    @property
    def zero(self) -> Any:
        return self.value_type.zero  # type: ignore[union-attr]

    def get_help_label(self) -> str:
        return f"<{self.label}>"

    def get_usage_text(self) -> str:
        return f"<{self.label}>"


@dataclass(frozen=True)
class OptionalArgument(_ValueArgument):
    """
    A flag-introduced argument taking exactly one value.

    Attributes:
        name (str): Key of the value in the parsed result.
        value_type (ValueType | str): Value type or registry name (default "string").
        short (str | None): Single-character short option (`-t`).
        long (str | None): Long option without dashes (`--threads`).
        arg_label (str | None): Value placeholder in help, defaults to `name`.
        default (Any): Value used when the option is not given; `None` means the
            value type's zero value.
        description (str): Help text.
        formatter (ValueFormatter | None): Renders the default in help output.
        parser (ValueParser | None): Custom parser, defaults to the value type's.
        precision (int | None): Significant digits shown for float defaults.
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.OPTIONAL

    name: str
    value_type: ValueType | str = "string"
    short: str | None = None
    long: str | None = None
    arg_label: str | None = None
    default: Any = None
    description: str = ""
    formatter: ValueFormatter | None = None
    parser: ValueParser | None = None  # type: ignore[assignment]
    precision: int | None = None

    def __post_init__(self) -> None:
        _validate_name(self.name)
        _validate_flags(self.name, self.short, self.long)
        value_type = value_types.resolve(self.value_type)
        object.__setattr__(self, "value_type", value_type)
        if self.arg_label is None:
            object.__setattr__(self, "arg_label", self.name)
        if self.default is None:
            object.__setattr__(self, "default", value_type.zero)
        if self.parser is None:
            object.__setattr__(self, "parser", value_type.parser)
        elif not callable(self.parser):
            raise SchemaError(f"Parser for '{self.name}' is not callable")
        if self.precision is not None:
            if not isinstance(self.precision, int) or self.precision < 0:
                raise SchemaError(
                    f"Precision of '{self.name}' must be a non-negative integer"
                )
        if self.formatter is None:
            if self.precision is not None:
                formatter = float_formatter(self.precision)
            else:
                formatter = value_type.formatter
            object.__setattr__(self, "formatter", formatter)
        elif not callable(self.formatter):
            raise SchemaError(f"Formatter for '{self.name}' is not callable")

    @property
    def flags(self) -> tuple[str, ...]:
        return _flags(self.short, self.long)

    def format_default(self) -> str:
        """Render the default value with this argument's formatter."""
        assert self.formatter is not None, "formatter is resolved in __post_init__"
        return self.formatter(self.default)

    def get_help_label(self) -> str:
        return f"{_flags_text(self.short, self.long)} <{self.arg_label}>"

    def get_usage_text(self) -> str:
        if self.short is not None:
            return f"[-{self.short}<{self.arg_label}>]"
        return f"[--{self.long} <{self.arg_label}>]"


@dataclass(frozen=True)
class BooleanArgument:
    """
    A flag-introduced switch without a value. Its default is always False.

    Attributes:
        name (str): Key of the value in the parsed result.
        short (str | None): Single-character short option (`-v`).
        long (str | None): Long option without dashes (`--verbose`).
        description (str): Help text.
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.BOOLEAN

    name: str
    short: str | None = None
    long: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        _validate_name(self.name)
        _validate_flags(self.name, self.short, self.long)

    @property
    def default(self) -> bool:
        return False

    @property
    def flags(self) -> tuple[str, ...]:
        return _flags(self.short, self.long)

    def get_help_label(self) -> str:
        return _flags_text(self.short, self.long)

    def get_usage_text(self) -> str:
        if self.short is not None:
            return f"[-{self.short}]"
        return f"[--{self.long}]"


Argument = RequiredArgument | OptionalArgument | BooleanArgument
