"""
Pipeline generator.

Runs the phases in order: parse, flatten, reduce, render, write.
Every run owns a fresh TypeTable, so one generator can be reused and
several generators can run side by side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .analyzer import Flattener, ReducedType, Reducer, TypeTable
from .backends import TypeScriptBackend
from .config import CodeGeneratorConfig, OutputConfig
from .schema_ast import SchemaDocument, SchemaParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything one run produces before rendering."""

    document: SchemaDocument
    table: TypeTable
    reduced: list[ReducedType] = field(default_factory=list)

    @property
    def schema_names(self) -> list[str]:
        return list(self.document.schemas)

    def to_dict(self) -> list[dict[str, Any]]:
        """Debug view of the reduced types."""
        return [item.to_dict() for item in self.reduced]


class PipelineGenerator:
    """Generates TypeScript interfaces from an OpenAPI document."""

    def __init__(
        self,
        document: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        output_config: OutputConfig | None = None,
    ):
        """
        Initialize the generator.

        Args:
            document: The loaded OpenAPI document
            config: Code generation configuration
            output_config: Output file handling configuration
        """
        self.document = document
        self.config = config or CodeGeneratorConfig()
        self.output_config = output_config or OutputConfig()

    def run(self) -> GenerationResult:
        """Parse, flatten and reduce the document."""
        parsed = SchemaParser().parse(self.document)

        table = TypeTable()
        Flattener(table, strict_names=self.config.strict_names).flatten_document(parsed)

        reducer = Reducer(metadata_type=self.config.metadata_type, fallback_type=self.config.fallback_type)
        reduced = reducer.reduce(table)

        return GenerationResult(document=parsed, table=table, reduced=reduced)

    def render(self, result: GenerationResult | None = None) -> dict[str, str]:
        """Render the TypeScript files for a run (a fresh one if none is given)."""
        if result is None:
            result = self.run()
        backend = TypeScriptBackend(self.config)
        return backend.generate(result.reduced, result.document.info, result.schema_names)

    def write(self, out_dir: Path | str, result: GenerationResult | None = None) -> list[Path]:
        """Render and write the TypeScript files into out_dir."""
        files = self.render(result)
        writer = AtomicWriter(mode=self.output_config.mode)
        written = writer.write_all(Path(out_dir), files, validate=self.output_config.validate_before_write)
        logger.debug("Wrote %d files to %s", len(written), out_dir)
        return written
