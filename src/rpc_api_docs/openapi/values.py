"""Example response values as an explicit tagged variant.

Example responses arrive as JSON text. ``from_json`` turns the decoded
literal into one of three node kinds so inference can branch on the kind
rather than probing arbitrary Python objects.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ScalarValue:
    """A leaf: a placeholder tag string, or a number/bool/null literal."""

    value: str | int | float | bool | None

    @property
    def tag(self) -> str | None:
        return self.value if isinstance(self.value, str) else None


@dataclass(frozen=True)
class SequenceValue:
    items: tuple["ExampleValue", ...]

    @property
    def first(self) -> "ExampleValue | None":
        return self.items[0] if self.items else None


@dataclass(frozen=True)
class MappingValue:
    entries: tuple[tuple[str, "ExampleValue"], ...]

    def __len__(self) -> int:
        return len(self.entries)


ExampleValue = Union[ScalarValue, SequenceValue, MappingValue]


def from_json(data: Any) -> ExampleValue:
    """Convert a decoded JSON literal into an ExampleValue tree."""
    if isinstance(data, list):
        return SequenceValue(tuple(from_json(item) for item in data))
    if isinstance(data, dict):
        return MappingValue(tuple((str(k), from_json(v)) for k, v in data.items()))
    return ScalarValue(data)
