"""
Argus Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument, BooleanArgument, OptionalArgument, RequiredArgument
from .argument_kind import ArgumentKind
from .container import ParsedArguments
from .engine import parse_args
from .help import build_help, print_help, render_help, report_error
from .schema import ArgumentSchema
from .value_parsers import ValueParserRegistry, ValueType, float_formatter, value_types

__all__ = [
    "Argument",
    "ArgumentKind",
    "ArgumentSchema",
    "BooleanArgument",
    "OptionalArgument",
    "ParsedArguments",
    "RequiredArgument",
    "ValueParserRegistry",
    "ValueType",
    "build_help",
    "float_formatter",
    "parse_args",
    "print_help",
    "render_help",
    "report_error",
    "value_types",
]
