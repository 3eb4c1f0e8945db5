"""
Atomic file writer for generated editors.

Sits outside the generation core: it takes a finished GeneratedSource and
puts it on disk, replacing a stale editor at the same path when allowed.
An interrupted write never leaves a half-written .cs file behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputConfig, OutputMode
from ..generator import GeneratedSource

logger = logging.getLogger(__name__)

# Asked before replacing an existing file; returning False cancels the save
ConfirmOverwrite = Callable[[Path], bool]


class EditorWriter:
    """Writes generated editors to disk.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Atomically replace the target file

    A save without a target path, or an overwrite the user declines, is a
    cancellation: nothing is written and no error is raised.
    """

    def __init__(
        self,
        output: OutputConfig | None = None,
        confirm_overwrite: ConfirmOverwrite | None = None,
    ):
        """Initialize the writer.

        Args:
            output: Output configuration (mode and atomicity)
            confirm_overwrite: Optional prompt used when the target exists and
                mode is ERROR_IF_EXISTS
        """
        self.output = output or OutputConfig()
        self._confirm_overwrite = confirm_overwrite

    def save(self, source: GeneratedSource, path: Path | str | None = None) -> Path | None:
        """Save a generated editor.

        Args:
            source: The generated source
            path: Target file; defaults to source.path

        Returns:
            The written path, or None if the save was cancelled

        Raises:
            FileExistsError: If the target exists, mode is ERROR_IF_EXISTS and
                no confirmation prompt was given
            OSError: If file operations fail
        """
        target = Path(path) if path is not None else source.path
        if target is None:
            logger.info("Save of %s cancelled: no output path", source.file_name)
            return None

        if target.exists() and self.output.mode != OutputMode.FORCE:
            if self._confirm_overwrite is None:
                raise FileExistsError(f"Output file already exists: {target}. Use force mode to replace it.")
            if not self._confirm_overwrite(target):
                logger.info("Save of %s cancelled: overwrite declined", target)
                return None

        if self.output.atomic_write:
            self.write(target, source.text)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.unlink(missing_ok=True)
            target.write_text(source.text, encoding="utf-8")

        logger.info("Wrote %s", target)
        return target

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        # Ensure parent directory exists
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
            # newline="" keeps the generated \n line endings on every platform
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise
