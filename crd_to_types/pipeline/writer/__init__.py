"""
Writer module.

Writes rendered files to disk atomically.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, OutputWriteError

__all__ = [
    "AtomicWriter",
    "OutputWriteError",
]
