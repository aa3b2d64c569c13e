"""
Schema AST module.

Contains the AST node definitions and parser for OpenAPI component schemas.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    InfoObject,
    ObjectNode,
    PrimitiveNode,
    SchemaDocument,
    SchemaNode,
    SchemaVariant,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "SchemaVariant",
    "PrimitiveNode",
    "ArrayNode",
    "ObjectNode",
    "InfoObject",
    "SchemaDocument",
    "SchemaParser",
]
