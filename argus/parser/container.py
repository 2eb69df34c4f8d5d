# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedArguments`, the container holding parsed (or default) values.

The container is a mapping keyed by argument name whose legal keys are fixed by
the schema that created it. Values are reachable both as items
(`args["threads"]`) and as attributes (`args.threads`). Assigning to a key the
schema does not declare raises `KeyError`, so a typo cannot silently create a
new field. A name that matches a mapping method (`values`, `get`, ...) is
only reachable as an item, since the attribute resolves to the method.
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping


class ParsedArguments(Mapping[str, Any]):
    """Name-keyed record of argument values whose keys are fixed at creation."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_values", dict(values))

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise KeyError(f"'{name}' is not a declared argument")
        self._values[name] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!s} has no argument '{name}'"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            self[name] = value
        except KeyError as error:
            raise AttributeError(str(error)) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def update_from(self, values: Mapping[str, Any]) -> None:
        """Assign several declared fields at once."""
        unknown = [name for name in values if name not in self._values]
        if unknown:
            raise KeyError(f"Not declared arguments: {', '.join(unknown)}")
        self._values.update(values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedArguments):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"ParsedArguments({fields})"
