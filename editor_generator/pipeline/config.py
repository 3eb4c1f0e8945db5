"""
Configuration for the editor generator pipeline.

Only presentation and output handling are configurable. The shape of the
generated editor (base class, name suffixes, eligible base types) is fixed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Replace the stale file


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for editor generation."""

    # Add the <auto-generated> banner at top of file
    add_generation_comment: bool = True

    # Command line recorded in the banner (empty = omitted)
    generation_command: str = ""

    # Extra using statements, after UnityEditor and UnityEngine
    additional_usings: list[str] = field(default_factory=list)

    # Add [CanEditMultipleObjects] to the generated editor
    can_edit_multiple_objects: bool = False

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "generation_command": self.generation_command,
            "additional_usings": self.additional_usings,
            "can_edit_multiple_objects": self.can_edit_multiple_objects,
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }
