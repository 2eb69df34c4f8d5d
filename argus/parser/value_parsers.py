# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value parsers and the value type registry used by argus descriptors.

A value parser converts the text of one argument into a typed value:

    parser(text) -> (value, consumed)

`consumed` is the number of leading characters of `text` the parser used, or
`None` when it used all of them. Short option clusters rely on this to resume
scanning after an inline value (`-t4v`), while long options and required
arguments reject anything that was left over.

Parsers report malformed input by raising `ValueError`. The numeric parsers
raise `MalformedNumber`, a `ValueError` subclass, for both format errors (no
digits) and range errors (value outside the width class of the type).

Functions:
- parse_str / parse_char: identity and single character parsers (never fail).
- parse_int, parse_uint, parse_long, parse_ulong, parse_longlong,
  parse_ulonglong, parse_size: base-10 integers in four width classes.
- parse_float, parse_double, parse_longdouble: single, double and extended
  precision floats (the last one as `decimal.Decimal`). Decimal and hex
  (`0x1.8p3`) literals are accepted.
- parse_datetime: whole-token date/time parsing through `dateutil`.
- float_formatter: build a `%.{precision}g` style formatter.

`value_types` is the default `ValueParserRegistry` holding every built-in type.
"""
from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Iterable, Iterator

from dateutil import parser as date_parser

from argus.exceptions import MalformedNumber, SchemaError

ParseResult = tuple[Any, int | None]
ValueParser = Callable[[str], ParseResult]
ValueFormatter = Callable[[Any], str]

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1

DEFAULT_PRECISION = 6

_SPACE = r"[ \t\n\r\f\v]*"
_INTEGER_PATTERN = re.compile(_SPACE + r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    _SPACE
    + r"""[+-]?
    (?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
      | inf(?:inity)?
      | nan
    )""",
    re.VERBOSE | re.IGNORECASE,
)


def _consumed(end: int, text: str) -> int | None:
    return None if end >= len(text) else end


def parse_str(text: str) -> ParseResult:
    """Return the text unchanged, consuming all of it."""
    return text, None


def parse_char(text: str) -> ParseResult:
    """Return the first character of the text and advance past it."""
    return text[:1], _consumed(1, text)


def _integer_parser(type_name: str, minimum: int, maximum: int) -> ValueParser:
    def parse(text: str) -> ParseResult:
        match = _INTEGER_PATTERN.match(text)
        if match is None:
            raise MalformedNumber(text, type_name, "no digits")
        value = int(match.group())
        if value < minimum or value > maximum:
            raise MalformedNumber(text, type_name, "out of range")
        return value, _consumed(match.end(), text)

    parse.__name__ = f"parse_{type_name}"
    parse.__doc__ = f"Parse a base-10 {type_name} prefix of the text."
    return parse


def _match_float(text: str, type_name: str) -> tuple[str, int | None]:
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        raise MalformedNumber(text, type_name, "no digits")
    return match.group().strip(), _consumed(match.end(), text)


def _to_float(literal: str, text: str, type_name: str) -> float:
    if "x" not in literal.lower():
        return float(literal)
    try:
        return float.fromhex(literal)
    except OverflowError as error:
        raise MalformedNumber(text, type_name, "out of range") from error


def _is_infinity_literal(literal: str) -> bool:
    return "inf" in literal.lower()


def parse_double(text: str) -> ParseResult:
    """Parse a double precision float prefix of the text."""
    literal, consumed = _match_float(text, "double")
    value = _to_float(literal, text, "double")
    if math.isinf(value) and not _is_infinity_literal(literal):
        raise MalformedNumber(text, "double", "out of range")
    return value, consumed


def parse_float(text: str) -> ParseResult:
    """Parse a single precision float prefix of the text."""
    literal, consumed = _match_float(text, "float")
    value = _to_float(literal, text, "float")
    if math.isinf(value) and not _is_infinity_literal(literal):
        raise MalformedNumber(text, "float", "out of range")
    try:
        (value,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError as error:
        raise MalformedNumber(text, "float", "out of range") from error
    return value, consumed


def parse_longdouble(text: str) -> ParseResult:
    """Parse an extended precision float prefix of the text as a `Decimal`."""
    literal, consumed = _match_float(text, "longdouble")
    if "x" in literal.lower():
        return Decimal(_to_float(literal, text, "longdouble")), consumed
    return Decimal(literal), consumed


def parse_datetime(text: str) -> ParseResult:
    """Parse the whole text as a date/time."""
    try:
        return date_parser.parse(text), None
    except OverflowError as error:
        raise ValueError(f"'{text}' is out of range for a datetime") from error


parse_int = _integer_parser("int", INT32_MIN, INT32_MAX)
parse_uint = _integer_parser("uint", 0, UINT32_MAX)
parse_long = _integer_parser("long", INT64_MIN, INT64_MAX)
parse_ulong = _integer_parser("ulong", 0, UINT64_MAX)
parse_longlong = _integer_parser("longlong", INT64_MIN, INT64_MAX)
parse_ulonglong = _integer_parser("ulonglong", 0, UINT64_MAX)
parse_size = _integer_parser("size", 0, UINT64_MAX)


def float_formatter(precision: int = DEFAULT_PRECISION) -> ValueFormatter:
    """Return a formatter rendering numbers like C's `%.{precision}g`."""

    def format_float(value: Any) -> str:
        return f"{value:.{precision}g}"

    return format_float


def format_datetime(value: datetime) -> str:
    return value.isoformat(sep=" ")


@dataclass(frozen=True)
class ValueType:
    """
    A named value type: how to parse it, how to show it, and its placeholder.

    Attributes:
        name (str): Registry name of the type (e.g. "uint").
        parser (ValueParser): Converts text into a value.
        formatter (ValueFormatter): Renders a value for help output.
        zero (Any): Placeholder stored in required fields before parsing.
        aliases (tuple[str, ...]): Alternative registry names.
        is_float (bool): Whether a display precision applies to the formatter.
    """

    name: str
    parser: ValueParser
    formatter: ValueFormatter = str
    zero: Any = None
    aliases: tuple[str, ...] = field(default_factory=tuple)
    is_float: bool = False

    def __str__(self) -> str:
        return self.name


class ValueParserRegistry:
    """Registry of value types addressable by name or alias."""

    def __init__(self, value_types: Iterable[ValueType] = ()) -> None:
        self._types: dict[str, ValueType] = {}
        self._aliases: dict[str, str] = {}
        for value_type in value_types:
            self.register(value_type)

    def register(self, value_type: ValueType, replace: bool = False) -> ValueType:
        """
        Register a value type under its name and aliases.

        Args:
            value_type (ValueType): The type to register.
            replace (bool): Allow overriding a type with the same name.

        Raises:
            SchemaError: If the name or one of the aliases is already taken.
        """
        if not isinstance(value_type, ValueType):
            raise SchemaError(f"Expected a ValueType, got {type(value_type).__name__}")
        if not callable(value_type.parser):
            raise SchemaError(f"Parser for value type '{value_type.name}' is not callable")
        for key in (value_type.name, *value_type.aliases):
            existing = self._lookup(key)
            if existing is not None and not (replace and existing.name == value_type.name):
                raise SchemaError(
                    f"Value type '{key}' is already registered as '{existing.name}'"
                )
        self._types[value_type.name] = value_type
        for alias in value_type.aliases:
            self._aliases[alias] = value_type.name
        return value_type

    def _lookup(self, key: str) -> ValueType | None:
        key = key.strip().lower()
        name = self._aliases.get(key, key)
        return self._types.get(name)

    def get(self, name: str) -> ValueType:
        """Return the value type registered under `name` or one of its aliases."""
        value_type = self._lookup(name)
        if value_type is None:
            valid = ", ".join(self._types)
            raise SchemaError(f"Unknown value type '{name}'. Must be one of: {valid}")
        return value_type

    def resolve(self, value_type: str | ValueType) -> ValueType:
        """Accept either a registered name or a `ValueType` instance."""
        if isinstance(value_type, ValueType):
            return value_type
        if isinstance(value_type, str):
            return self.get(value_type)
        raise SchemaError(
            f"value_type must be a name or a ValueType, got {type(value_type).__name__}"
        )

    def copy(self) -> ValueParserRegistry:
        """Return an independent registry with the same types."""
        return ValueParserRegistry(self._types.values())

    def names(self) -> list[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._lookup(name) is not None

    def __iter__(self) -> Iterator[ValueType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)


value_types = ValueParserRegistry(
    [
        ValueType("string", parse_str, zero="", aliases=("str",)),
        ValueType("char", parse_char, zero=""),
        ValueType("int", parse_int, zero=0),
        ValueType("uint", parse_uint, zero=0, aliases=("unsigned",)),
        ValueType("long", parse_long, zero=0),
        ValueType("ulong", parse_ulong, zero=0),
        ValueType("longlong", parse_longlong, zero=0, aliases=("ll",)),
        ValueType("ulonglong", parse_ulonglong, zero=0, aliases=("ull",)),
        ValueType("size", parse_size, zero=0),
        ValueType("float", parse_float, float_formatter(), 0.0, is_float=True),
        ValueType("double", parse_double, float_formatter(), 0.0, is_float=True),
        ValueType(
            "longdouble",
            parse_longdouble,
            float_formatter(),
            Decimal(0),
            is_float=True,
        ),
        ValueType("datetime", parse_datetime, format_datetime, datetime.min),
    ]
)
