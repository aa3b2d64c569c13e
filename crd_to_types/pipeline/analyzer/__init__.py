"""
Analyzer module.

Contains the flattener, the reducer and the IR they share.
"""

from __future__ import annotations

from .flattener import Flattener, NameCollisionError
from .ir_nodes import FieldRecord, ReducedType, TypeRecord, TypeTable
from .reducer import DEFAULT_FALLBACK_TYPE, DEFAULT_METADATA_TYPE, Reducer

__all__ = [
    "FieldRecord",
    "TypeRecord",
    "TypeTable",
    "ReducedType",
    "Flattener",
    "NameCollisionError",
    "Reducer",
    "DEFAULT_METADATA_TYPE",
    "DEFAULT_FALLBACK_TYPE",
]
