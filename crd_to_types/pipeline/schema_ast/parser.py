"""
OpenAPI document parser that builds a schema AST.

Phase 1 of the pipeline: turn the raw loaded document into a
SchemaDocument without any flattening or type coercion.
"""

from __future__ import annotations

from typing import Any

from .nodes import (
    ArrayNode,
    InfoObject,
    ObjectNode,
    PrimitiveNode,
    SchemaDocument,
    SchemaVariant,
)


class SchemaParser:
    """Parses an OpenAPI document into a SchemaDocument."""

    def parse(self, document: dict[str, Any]) -> SchemaDocument:
        """
        Parse an OpenAPI document.

        Args:
            document: The loaded OpenAPI dictionary

        Returns:
            SchemaDocument with the info section and parsed component schemas
        """
        parsed = SchemaDocument(info=self._parse_info(document.get("info") or {}))

        schemas = (document.get("components") or {}).get("schemas") or {}
        for name, schema in schemas.items():
            parsed.schemas[name] = self.parse_schema(schema, f"#/components/schemas/{name}")

        return parsed

    def _parse_info(self, info: dict[str, Any]) -> InfoObject:
        """Extract the info fields the renderer needs."""
        contact = info.get("contact") or {}
        license_ = info.get("license") or {}
        return InfoObject(
            title=str(info.get("title", "")),
            version=str(info.get("version", "")),
            description=info.get("description"),
            contact_email=contact.get("email"),
            license_name=license_.get("name"),
        )

    def parse_schema(self, schema: Any, path: str = "#") -> SchemaVariant:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: Current path in the document (for log messages)

        Returns:
            PrimitiveNode, ArrayNode or ObjectNode
        """
        if not isinstance(schema, dict):
            return PrimitiveNode(source_path=path)

        type_name = self._type_tag(schema.get("type"))

        if type_name == "array" or (type_name is None and "items" in schema):
            return self._parse_array_node(schema, path)

        if type_name == "object" or (type_name is None and "properties" in schema):
            return self._parse_object_node(schema, path)

        return self._parse_primitive_node(schema, type_name, path)

    def _type_tag(self, type_value: Any) -> str | None:
        """Normalize the `type` keyword to a single tag."""
        # Type arrays such as ["string", "null"] use the first non-null member
        if isinstance(type_value, list):
            candidates = [t for t in type_value if t != "null"]
            if candidates:
                return candidates[0]
            return "null" if type_value else None
        if isinstance(type_value, str):
            return type_value
        return None

    def _parse_array_node(self, schema: dict[str, Any], path: str) -> ArrayNode:
        """Parse an array node."""
        items = schema.get("items")
        if items is None:
            item_node: SchemaVariant = PrimitiveNode(source_path=f"{path}/items")
        else:
            item_node = self.parse_schema(items, f"{path}/items")

        return ArrayNode(
            items=item_node,
            description=schema.get("description"),
            source_path=path,
        )

    def _parse_object_node(self, schema: dict[str, Any], path: str) -> ObjectNode:
        """Parse an object node."""
        properties = {}
        for prop_name, prop_schema in (schema.get("properties") or {}).items():
            properties[prop_name] = self.parse_schema(prop_schema, f"{path}/properties/{prop_name}")

        return ObjectNode(
            properties=properties,
            required=list(schema.get("required") or []),
            description=schema.get("description"),
            source_path=path,
        )

    def _parse_primitive_node(self, schema: dict[str, Any], type_name: str | None, path: str) -> PrimitiveNode:
        """Parse a primitive node."""
        enum = schema.get("enum")

        return PrimitiveNode(
            type_name=type_name,
            format=schema.get("format"),
            enum=list(enum) if enum is not None else None,
            pattern=schema.get("pattern"),
            default=schema.get("default"),
            has_default="default" in schema,
            description=schema.get("description"),
            source_path=path,
        )
