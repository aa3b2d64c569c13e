"""
AST node definitions for OpenAPI component schemas.

These nodes represent the parsed structure of a schema document before
flattening. A schema is exactly one of three shapes: primitive, array
or object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Primitive type tags understood by the flattener ("date" is not OpenAPI,
# but shows up in CRD-derived documents)
PRIMITIVE_TYPES = ("null", "boolean", "number", "string", "integer", "date")


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    description: str | None = None

    # Original source location in the document (for log messages)
    source_path: str = ""


@dataclass
class PrimitiveNode(SchemaNode):
    """A leaf schema: null, boolean, number, string, integer or date."""

    # None when the schema carries no usable type tag
    type_name: str | None = None

    format: str | None = None
    enum: list[Any] | None = None
    pattern: str | None = None
    default: Any = None
    has_default: bool = False


@dataclass
class ArrayNode(SchemaNode):
    """An array schema wrapping a single item schema."""

    items: SchemaNode = field(default_factory=PrimitiveNode)


@dataclass
class ObjectNode(SchemaNode):
    """An object schema with ordered properties."""

    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)


SchemaVariant = PrimitiveNode | ArrayNode | ObjectNode


@dataclass
class InfoObject:
    """The `info` section of the document, passed through to the renderer."""

    title: str = ""
    version: str = ""
    description: str | None = None
    contact_email: str | None = None
    license_name: str | None = None


@dataclass
class SchemaDocument:
    """Root of the parsed document."""

    info: InfoObject = field(default_factory=InfoObject)

    # Top-level schema key -> schema, in document order
    schemas: dict[str, SchemaVariant] = field(default_factory=dict)
