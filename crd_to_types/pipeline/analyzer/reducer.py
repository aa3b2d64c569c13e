"""
Type table reducer.

Phase 3 of the pipeline: resolve references between flattened types,
substitute fallback types for references to empty types, coerce
primitives to TypeScript types and collect per-type imports.
"""

from __future__ import annotations

import copy
import datetime
import json
import logging
from typing import Any

from .ir_nodes import FieldRecord, ReducedType, TypeRecord, TypeTable

logger = logging.getLogger(__name__)

DEFAULT_METADATA_TYPE = "IoK8sApimachineryPkgApisMetaV1ObjectMeta"
DEFAULT_FALLBACK_TYPE = "unknown | null"

# Root fields every resource instance carries
DISCRIMINATOR_FIELDS = ("kind", "apiVersion")

NOT_DEFINED = "not defined"


class Reducer:
    """Turns a completed TypeTable into finalized types with imports."""

    def __init__(self, metadata_type: str = DEFAULT_METADATA_TYPE, fallback_type: str = DEFAULT_FALLBACK_TYPE):
        """
        Initialize the reducer.

        Args:
            metadata_type: Externally supplied type used for an undefined root `metadata` field
            fallback_type: Type expression used for any other undefined field
        """
        self.metadata_type = metadata_type
        self.fallback_type = fallback_type

    def reduce(self, table: TypeTable) -> list[ReducedType]:
        """
        Reduce the table.

        The table itself is left untouched; every returned type is a copy.

        Args:
            table: Table filled by the flattener

        Returns:
            One ReducedType per type with at least one field, in table order
        """
        output = []

        for source in table:
            if not source.fields:
                continue

            record = copy.deepcopy(source)
            imports: list[str] = []
            for field in record.fields.values():
                self._reduce_field(table, record, field, imports)

            output.append(ReducedType(import_names=imports, type=record))

        logger.debug("Reduced %d types to %d non-empty types", len(table), len(output))
        return output

    def _reduce_field(self, table: TypeTable, record: TypeRecord, field: FieldRecord, imports: list[str]) -> None:
        if field.is_object:
            self._resolve_reference(table, record, field, imports)
        elif field.type_reference is None:
            field.original_type = NOT_DEFINED
            field.type_reference = self.fallback_type

        if record.is_root and field.name in DISCRIMINATOR_FIELDS and field.type_reference == "string":
            field.required = True

        if not field.is_object:
            self._coerce_primitive(field)

        if field.is_array:
            field.type_reference = array_of(field.type_reference)

    def _resolve_reference(self, table: TypeTable, record: TypeRecord, field: FieldRecord, imports: list[str]) -> None:
        child = table.get(field.type_reference)
        if child is not None and child.fields:
            _add_import(imports, field.type_reference)
            return

        if record.is_root and field.name == "metadata":
            field.original_type = field.type_reference
            field.type_reference = self.metadata_type
            _add_import(imports, self.metadata_type)
        else:
            field.original_type = NOT_DEFINED
            field.type_reference = self.fallback_type

    def _coerce_primitive(self, field: FieldRecord) -> None:
        if field.type_reference == "date":
            field.original_type = "date"
            field.type_reference = "string"
            field.format = field.format or "date"

        if field.type_reference == "integer":
            field.original_type = "integer"
            field.type_reference = "number"
            field.format = field.format or "int64"

        if field.type_reference == "string" and field.enum_values:
            field.original_type = "string"
            field.type_reference = literal_union(field.enum_values)


def _add_import(imports: list[str], name: str) -> None:
    if name not in imports:
        imports.append(name)


def _literal(value: Any) -> str:
    if isinstance(value, datetime.date):
        value = value.isoformat()
    text = value if isinstance(value, str) else json.dumps(value, default=str)
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def literal_union(values: list[Any]) -> str:
    """Build a union of quoted literals, e.g. `'a' | 'b'`."""
    return " | ".join(_literal(v) for v in values)


def array_of(type_expression: str) -> str:
    """Wrap a type expression as an array, parenthesizing compound expressions."""
    if " " in type_expression:
        return f"({type_expression})[]"
    return f"{type_expression}[]"
