"""
Code generation backends.

Contains the target-language generators.
"""

from __future__ import annotations

from .base import CodeBackend
from .typescript_backend import TypeScriptBackend

__all__ = [
    "CodeBackend",
    "TypeScriptBackend",
]
