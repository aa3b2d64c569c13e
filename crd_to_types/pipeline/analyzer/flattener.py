"""
Schema flattener.

Phase 2 of the pipeline: walk each top-level schema depth-first and
register one flat TypeRecord per object schema, with the object's
primitive and nested-object properties as fields.
"""

from __future__ import annotations

import logging
from typing import assert_never

from ...utils import upper_first
from ..schema_ast.nodes import ArrayNode, ObjectNode, PrimitiveNode, SchemaDocument, SchemaVariant
from .ir_nodes import FieldRecord, TypeRecord, TypeTable

logger = logging.getLogger(__name__)


class NameCollisionError(Exception):
    """Raised when two schema paths produce the same synthetic type name."""

    def __init__(self, name: str, source_path: str):
        self.name = name
        self.source_path = source_path
        super().__init__(f"Synthetic type name {name!r} is produced more than once (again at {source_path})")


class Flattener:
    """Flattens nested schemas into a TypeTable.

    The table is passed in and mutated, so one table must belong to one
    pipeline run.
    """

    def __init__(self, table: TypeTable, strict_names: bool = False):
        """
        Initialize the flattener.

        Args:
            table: The table to fill
            strict_names: Raise NameCollisionError instead of overwriting
                a type whose synthetic name is produced twice
        """
        self.table = table
        self.strict_names = strict_names

    def flatten_document(self, document: SchemaDocument) -> TypeTable:
        """Flatten every top-level schema of a document."""
        for key, node in document.schemas.items():
            self.flatten("", key, node)
        logger.debug("Flattened %d schemas into %d types", len(document.schemas), len(self.table))
        return self.table

    def flatten(self, parent_type_name: str, field_name: str, node: SchemaVariant, is_array: bool = False) -> None:
        """
        Flatten one schema node into the table.

        Args:
            parent_type_name: Name of the type owning this field ("" for top-level schemas)
            field_name: Property name (or schema key at top level)
            node: The schema of the field
            is_array: Whether the field is wrapped in an array
        """
        match node:
            case ArrayNode():
                # Nested arrays collapse into a single level of wrapping
                self.flatten(parent_type_name, field_name, node.items, True)
            case ObjectNode():
                self._flatten_object(parent_type_name, field_name, node, is_array)
            case PrimitiveNode():
                self._flatten_primitive(parent_type_name, field_name, node, is_array)
            case _:
                assert_never(node)

    def _synthetic_name(self, parent_type_name: str, field_name: str) -> str:
        if parent_type_name == "":
            return field_name
        return parent_type_name + upper_first(field_name)

    def _flatten_object(self, parent_type_name: str, field_name: str, node: ObjectNode, is_array: bool) -> None:
        type_name = self._synthetic_name(parent_type_name, field_name)

        record = TypeRecord(
            name=type_name,
            parent_name=parent_type_name,
            description=node.description,
            required_names=list(node.required),
        )
        if type_name in self.table:
            if self.strict_names:
                raise NameCollisionError(type_name, node.source_path)
            logger.warning("Type %s is defined again at %s, keeping the last definition", type_name, node.source_path)
        self.table.register(record)

        parent = self.table.get(parent_type_name)
        if parent is not None:
            parent.fields[field_name] = FieldRecord(
                name=field_name,
                description=node.description,
                type_reference=type_name,
                is_array=is_array,
                is_object=True,
                required=field_name in parent.required_names,
            )

        for prop_name, prop_node in node.properties.items():
            self.flatten(type_name, prop_name, prop_node)

    def _flatten_primitive(self, parent_type_name: str, field_name: str, node: PrimitiveNode, is_array: bool) -> None:
        parent = self.table.get(parent_type_name)
        if parent is None:
            logger.debug("Skipping %s: a primitive schema has no owning type", node.source_path or field_name)
            return

        parent.fields[field_name] = FieldRecord(
            name=field_name,
            description=node.description,
            type_reference=node.type_name,
            is_array=is_array,
            is_object=False,
            format=node.format,
            enum_values=list(node.enum) if node.enum is not None else None,
            pattern=node.pattern,
            default_value=node.default,
            has_default=node.has_default,
            required=field_name in parent.required_names,
        )
