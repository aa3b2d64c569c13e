"""
Pipeline - OpenAPI component schemas to TypeScript interfaces.

Phases:

1. Loader: read the JSON or YAML document
2. Parser: build the schema AST
3. Flattener: turn nested schemas into a table of flat named types
4. Reducer: resolve references, apply fallbacks and type coercions
5. Backend: render TypeScript with Jinja2 templates
6. Writer: write the files atomically
"""

from __future__ import annotations

from .analyzer import NameCollisionError
from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .generator import GenerationResult, PipelineGenerator
from .loader import SchemaLoadError, load_document
from .writer import AtomicWriter, OutputWriteError

__all__ = [
    "PipelineGenerator",
    "GenerationResult",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "load_document",
    "SchemaLoadError",
    "NameCollisionError",
    "AtomicWriter",
    "OutputWriteError",
]
