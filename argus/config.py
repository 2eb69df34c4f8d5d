# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Schema loader: build an `ArgumentSchema` from a YAML or TOML file.

Example (YAML):

    program: file_processor
    arguments:
      - kind: required
        name: input_file
        label: input
        description: Input file path
      - kind: optional
        name: threads
        type: uint
        short: t
        long: threads
        label: threads
        default: 1
        description: Number of threads to use
      - kind: boolean
        name: help
        short: h
        long: help
        description: Show help

Custom parsers and formatters are referenced by dotted import path
(`parser: mypackage.parsers.parse_positive_int`).
"""
from __future__ import annotations

import importlib
from dataclasses import replace
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from argus.exceptions import ConfigError, SchemaError
from argus.logger import logger
from argus.parser.argument import (
    Argument,
    BooleanArgument,
    OptionalArgument,
    RequiredArgument,
)
from argus.parser.argument_kind import ArgumentKind
from argus.parser.schema import ArgumentSchema
from argus.parser.value_parsers import ValueParserRegistry, parse_str, value_types

_KIND_FIELDS = {
    ArgumentKind.REQUIRED: {"kind", "name", "type", "label", "description", "parser"},
    ArgumentKind.OPTIONAL: {
        "kind",
        "name",
        "type",
        "label",
        "description",
        "short",
        "long",
        "default",
        "precision",
        "parser",
        "formatter",
    },
    ArgumentKind.BOOLEAN: {"kind", "name", "short", "long", "description"},
}


def import_object(dotted_path: str) -> Any:
    """Dynamically imports an object from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


class RawArgument(BaseModel):
    """Raw argument entry of a schema file."""

    model_config = ConfigDict(extra="forbid")

    kind: ArgumentKind
    name: str
    type: str = "string"
    label: str | None = None
    description: str = ""
    short: str | None = None
    long: str | None = None
    default: Any = None
    precision: int | None = None
    parser: str | None = None
    formatter: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)

    @field_validator("short", "long", mode="before")
    @classmethod
    def stringify_flag(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def check_fields_for_kind(self) -> RawArgument:
        unexpected = sorted(self.model_fields_set - _KIND_FIELDS[self.kind])
        if unexpected:
            raise ValueError(
                f"{self.kind} argument '{self.name}' does not accept: {', '.join(unexpected)}"
            )
        return self

    def _convert_default(self, argument: OptionalArgument) -> OptionalArgument:
        if not isinstance(self.default, str) or argument.parser is parse_str:
            return argument
        try:
            value, consumed = argument.parse_value(self.default)
        except ValueError as error:
            raise SchemaError(
                f"Default value '{self.default}' for '{self.name}' is invalid: {error}"
            ) from error
        if consumed is not None and consumed < len(self.default):
            raise SchemaError(
                f"Default value '{self.default}' for '{self.name}' has trailing input"
            )
        return replace(argument, default=value)

    def to_argument(self, registry: ValueParserRegistry = value_types) -> Argument:
        """Build the descriptor this entry describes."""
        parser = import_object(self.parser) if self.parser else None
        if self.kind == ArgumentKind.REQUIRED:
            return RequiredArgument(
                name=self.name,
                value_type=registry.get(self.type),
                label=self.label,
                description=self.description,
                parser=parser,
            )
        if self.kind == ArgumentKind.OPTIONAL:
            argument = OptionalArgument(
                name=self.name,
                value_type=registry.get(self.type),
                short=self.short,
                long=self.long,
                arg_label=self.label,
                default=self.default,
                description=self.description,
                formatter=import_object(self.formatter) if self.formatter else None,
                parser=parser,
                precision=self.precision,
            )
            return self._convert_default(argument)
        return BooleanArgument(
            name=self.name,
            short=self.short,
            long=self.long,
            description=self.description,
        )


class RawSchema(BaseModel):
    """Schema file model."""

    model_config = ConfigDict(extra="forbid")

    program: str | None = None
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_schema(self, registry: ValueParserRegistry = value_types) -> ArgumentSchema:
        schema = ArgumentSchema(program=self.program)
        for raw_argument in self.arguments:
            schema.add(raw_argument.to_argument(registry))
        return schema


def _read_config(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".toml"):
        raise ConfigError(f"Unsupported config format: {suffix}")
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix == ".toml":
                return toml.load(config_file)
            return yaml.safe_load(config_file)
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error


def load_schema(
    file_path: Path | str, registry: ValueParserRegistry = value_types
) -> ArgumentSchema:
    """
    Load an argument schema from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the schema file.
        registry (ValueParserRegistry): Where `type` names are looked up.

    Returns:
        ArgumentSchema: The schema. Its `program` defaults to the file stem.

    Raises:
        ConfigError: If the file is missing, unsupported, malformed or describes
            an invalid schema.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such schema file: {file_path}")

    raw_config = _read_config(path)
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Schema file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "program: copy\n"
            "arguments:\n"
            "  - kind: required\n"
            "    name: source\n"
            "    description: Source file"
        )

    try:
        raw_schema = RawSchema.model_validate(raw_config)
        schema = raw_schema.to_schema(registry)
    except ValidationError as error:
        raise ConfigError(f"Invalid schema in {path}:\n{error}") from error
    except SchemaError as error:
        raise ConfigError(f"Invalid schema in {path}: {error}") from error
    if schema.program is None:
        schema.program = path.stem
    logger.debug("Loaded %s from %s", schema, path)
    return schema
