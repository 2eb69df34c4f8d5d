# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, the enum naming the three descriptor families of an
argus schema.

Supports alias coercion for shorthand or config-friendly values so schema files
can say `positional` or `flag` instead of the canonical names.

Example:
    ArgumentKind("required")   → ArgumentKind.REQUIRED
    ArgumentKind("positional") → ArgumentKind.REQUIRED (via alias)
    ArgumentKind("switch")     → ArgumentKind.BOOLEAN (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentKind(Enum):
    """
    The family an argument descriptor belongs to.

    Members:
        REQUIRED: Positional argument consuming exactly one token, in declared order.
        OPTIONAL: Flag-introduced argument taking one value, with a default.
        BOOLEAN: Flag-introduced switch without a value, defaulting to False.

    Aliases:
        - "positional" → "required"
        - "option", "value" → "optional"
        - "flag", "switch", "bool" → "boolean"
    """

    REQUIRED = "required"
    OPTIONAL = "optional"
    BOOLEAN = "boolean"

    @classmethod
    def choices(cls) -> list[ArgumentKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "positional": "required",
            "option": "optional",
            "value": "optional",
            "flag": "boolean",
            "switch": "boolean",
            "bool": "boolean",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
