"""
Atomic file writer for generated TypeScript.

Ensures that file writes are atomic so an interrupted run never leaves
a half-written interface file behind.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputMode

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_QUOTED = re.compile(r"'(?:\\.|[^'\\])*'")


class OutputWriteError(Exception):
    """Raised when a generated file cannot be written.

    This can happen when:
    - The rendered content fails validation
    - The target exists and the output mode forbids overwriting
    """


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        mode: OutputMode = OutputMode.FORCE,
        validate_typescript: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            mode: How to handle existing target files
            validate_typescript: Optional validation function for TypeScript code
        """
        self.mode = mode
        self._validate_typescript = validate_typescript or self._default_validate_typescript

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If validation fails or the target may not be replaced
            OSError: If file operations fail
        """
        if self.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputWriteError(f"Output file already exists: {path}. Drop --no-overwrite to replace it.")

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_typescript(content)

            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def write_all(self, out_dir: Path, files: dict[str, str], validate: bool = True) -> list[Path]:
        """Write every rendered file into out_dir. Returns the written paths."""
        if self.mode == OutputMode.ERROR_IF_EXISTS:
            for name in files:
                if (out_dir / name).exists():
                    raise OutputWriteError(f"Output file already exists: {out_dir / name}. Drop --no-overwrite to replace it.")

        written = []
        for name, content in files.items():
            path = out_dir / name
            self.write(path, content, validate)
            written.append(path)
        return written

    def _default_validate_typescript(self, content: str) -> None:
        """Default TypeScript validation.

        Args:
            content: TypeScript code to validate

        Raises:
            OutputWriteError: If validation fails
        """
        if "export " not in content:
            raise OutputWriteError("Generated TypeScript code has no exports")

        # Descriptions and literal types may contain braces of their own
        code = _QUOTED.sub("''", _BLOCK_COMMENT.sub("", content))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputWriteError(f"Generated TypeScript code has unbalanced braces: {open_braces} open, {close_braces} close")
