"""
IR (Intermediate Representation) node definitions.

These nodes hold the flattened schema: a table of named, non-nested
types whose fields reference either a primitive type or another type
in the same table.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FieldRecord:
    """A field inside a flattened type."""

    name: str = ""
    description: str | None = None

    # Primitive or target type name, or the name of another TypeRecord.
    # None when the source schema carried no type.
    type_reference: str | None = None

    is_array: bool = False
    is_object: bool = False

    # Set when a coercion rewrote type_reference
    original_type: str | None = None

    format: str | None = None
    enum_values: list[Any] | None = None
    pattern: str | None = None
    default_value: Any = None
    has_default: bool = False
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary, skipping unset values."""
        d: dict[str, Any] = {
            "name": self.name,
            "type": self.type_reference,
            "isArray": self.is_array,
            "isObject": self.is_object,
            "required": self.required,
        }
        if self.description is not None:
            d["description"] = self.description
        if self.original_type is not None:
            d["originalType"] = self.original_type
        if self.format is not None:
            d["format"] = self.format
        if self.enum_values is not None:
            d["enum"] = self.enum_values
        if self.pattern is not None:
            d["pattern"] = self.pattern
        if self.has_default:
            d["default"] = self.default_value
        return d


@dataclass
class TypeRecord:
    """A flat named type."""

    name: str = ""

    # Name of the type owning this one as a nested field ("" for root types)
    parent_name: str = ""

    description: str | None = None

    # Field name -> field, in schema declaration order
    fields: dict[str, FieldRecord] = field(default_factory=dict)

    # Required names copied from the source object schema
    required_names: list[str] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent_name == ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        d: dict[str, Any] = {
            "parent": self.parent_name,
            "name": self.name,
            "fields": {name: f.to_dict() for name, f in self.fields.items()},
            "required": list(self.required_names),
        }
        if self.description is not None:
            d["description"] = self.description
        return d


class TypeTable:
    """Ordered table of flattened types, keyed by synthetic name.

    Iteration order is registration order. Registering an existing name
    replaces its record but keeps its original position.
    """

    def __init__(self) -> None:
        self._order: list[str] = []
        self._index: dict[str, TypeRecord] = {}

    def register(self, record: TypeRecord) -> bool:
        """Add or replace a record. Returns True if the name was already taken."""
        existed = record.name in self._index
        if not existed:
            self._order.append(record.name)
        self._index[record.name] = record
        return existed

    def get(self, name: str | None) -> TypeRecord | None:
        if name is None:
            return None
        return self._index.get(name)

    def names(self) -> list[str]:
        return list(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[TypeRecord]:
        for name in self._order:
            yield self._index[name]

    def __len__(self) -> int:
        return len(self._order)

    def to_dict(self) -> dict[str, Any]:
        return {record.name: record.to_dict() for record in self}


@dataclass
class ReducedType:
    """A finalized type plus the names it must import."""

    import_names: list[str] = field(default_factory=list)
    type: TypeRecord = field(default_factory=TypeRecord)

    def to_dict(self) -> dict[str, Any]:
        return {"imports": list(self.import_names), "type": self.type.to_dict()}
