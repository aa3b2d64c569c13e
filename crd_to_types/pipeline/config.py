"""
Configuration for the generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .analyzer.reducer import DEFAULT_FALLBACK_TYPE, DEFAULT_METADATA_TYPE


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    FORCE = "force"  # Default: overwrite
    ERROR_IF_EXISTS = "error"  # Raise error if file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check rendered code before writing
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Type used for a root `metadata` field whose schema has no properties
    metadata_type: str = DEFAULT_METADATA_TYPE

    # Type expression used for any other field without a usable type
    fallback_type: str = DEFAULT_FALLBACK_TYPE

    # Fail on synthetic type name collisions instead of keeping the last one
    strict_names: bool = False

    # Add the generating command line to each file header
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "metadata_type": self.metadata_type,
            "fallback_type": self.fallback_type,
            "strict_names": self.strict_names,
            "add_generation_comment": self.add_generation_comment,
        }
