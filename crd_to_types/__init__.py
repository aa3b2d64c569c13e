"""CRD to TypeScript types

Generates flat TypeScript interfaces from the OpenAPI component schemas
produced for Kubernetes Custom Resource Definitions.
"""

__version__ = "0.1.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    GenerationResult,
    NameCollisionError,
    OutputConfig,
    OutputMode,
    OutputWriteError,
    PipelineGenerator,
    SchemaLoadError,
    load_document,
)

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
