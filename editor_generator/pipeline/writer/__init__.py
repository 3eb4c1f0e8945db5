"""
Writer module.

Saves generated editors to disk, outside the generation core.
"""

from __future__ import annotations

from .atomic_writer import ConfirmOverwrite, EditorWriter

__all__ = [
    "ConfirmOverwrite",
    "EditorWriter",
]
