"""
TypeScript code generation backend.

Renders one interface file per reduced type, the metadata fallback
interface and a barrel index file.
"""

from __future__ import annotations

import json
from typing import Any

from ...utils import is_identifier
from ..analyzer.ir_nodes import FieldRecord, ReducedType
from ..schema_ast.nodes import InfoObject
from .base import CodeBackend


def _doc_lines(text: str | None) -> list[str]:
    """Split a description into JSDoc-safe lines."""
    if not text:
        return []
    return [line.rstrip() for line in text.replace("*/", "*\\/").strip().splitlines()]


class TypeScriptBackend(CodeBackend):
    """TypeScript interface generation backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def generate(self, reduced: list[ReducedType], info: InfoObject, schema_names: list[str]) -> dict[str, str]:
        """Generate TypeScript files from reduced types."""
        header = self.render_header(info)
        files: dict[str, str] = {}

        for item in reduced:
            files[f"{item.type.name}.ts"] = header + self.render_interface(item)

        metadata_type = self.config.metadata_type
        files[f"{metadata_type}.ts"] = header + self.get_template("metadata").render(METADATA_TYPE=metadata_type)

        emitted = {item.type.name for item in reduced}
        exports = [name for name in schema_names if name in emitted]
        files["index.ts"] = header + self.get_template("index").render(
            exports=exports,
            METADATA_TYPE=metadata_type,
        )

        return files

    def render_header(self, info: InfoObject) -> str:
        return self.get_template("header").render(
            title_lines=_doc_lines(info.title),
            description_lines=_doc_lines(info.description),
            version=info.version,
            contact_email=info.contact_email,
            license_name=info.license_name,
            command=self._generate_command_comment(),
        )

    def render_interface(self, item: ReducedType) -> str:
        return self.get_template("interface").render(
            imports=item.import_names,
            INTERFACE_NAME=item.type.name,
            description_lines=_doc_lines(item.type.description),
            fields=[self._prepare_field_context(f) for f in item.type.fields.values()],
        )

    def _prepare_field_context(self, field: FieldRecord) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Args:
            field: The reduced field

        Returns:
            Dictionary of template variables
        """
        tags = [f"@required {{{json.dumps(field.required)}}}"]
        if field.format is not None:
            tags.append(f"@format {{{field.format}}}")
        if field.pattern is not None:
            tags.append(f"@pattern {{{field.pattern}}}")
        if field.has_default:
            tags.append(f"@default {{{json.dumps(field.default_value, default=str)}}}")
        if field.original_type is not None:
            tags.append(f"@originalType {{{field.original_type}}}")

        return {
            "name": field.name,
            "property": field.name if is_identifier(field.name) else "'" + field.name.replace("'", "\\'") + "'",
            "optional": not field.required,
            "type": field.type_reference,
            "description_lines": _doc_lines(field.description),
            "tags": [tag.replace("*/", "*\\/") for tag in tags],
        }
