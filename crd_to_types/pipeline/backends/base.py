"""
Base class for code generation backends.

Defines the interface a target-language backend implements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ... import __version__
from ...cli_utils import reconstruct_command_line
from ..analyzer.ir_nodes import ReducedType
from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import InfoObject


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
        )

    def get_template(self, name: str) -> jinja2.Template:
        return self.jinja_env.get_template(f"{name}.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, reduced: list[ReducedType], info: InfoObject, schema_names: list[str]) -> dict[str, str]:
        """
        Generate source files from reduced types.

        Args:
            reduced: Finalized types in emission order
            info: Document info passed through to file headers
            schema_names: All top-level schema keys, in document order

        Returns:
            Ordered mapping of file name to file content
        """

    def _generate_command_comment(self) -> str:
        """Generate the command line note for file headers."""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ...crd_to_types import crdtotypes as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "crdtotypes"

        return f"Generated by crdtotypes v{__version__} : {command_line}"
