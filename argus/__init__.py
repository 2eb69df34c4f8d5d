"""
Argus Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import load_schema
from .exceptions import (
    ArgusError,
    ConfigError,
    InvalidValue,
    MalformedNumber,
    MissingRequiredArgument,
    OptionRequiresValue,
    ParseError,
    SchemaError,
    TrailingUnparsedInput,
    UnexpectedPositionalArgument,
    UnknownFlag,
)
from .parser import (
    ArgumentKind,
    ArgumentSchema,
    BooleanArgument,
    OptionalArgument,
    ParsedArguments,
    RequiredArgument,
    ValueType,
    report_error,
    value_types,
)

logger = logging.getLogger("argus")

__version__ = "0.1.0"

__all__ = [
    "ArgumentKind",
    "ArgumentSchema",
    "ArgusError",
    "BooleanArgument",
    "ConfigError",
    "InvalidValue",
    "MalformedNumber",
    "MissingRequiredArgument",
    "OptionRequiresValue",
    "OptionalArgument",
    "ParseError",
    "ParsedArguments",
    "RequiredArgument",
    "SchemaError",
    "TrailingUnparsedInput",
    "UnexpectedPositionalArgument",
    "UnknownFlag",
    "ValueType",
    "load_schema",
    "report_error",
    "value_types",
]
