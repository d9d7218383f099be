#!/usr/bin/env python3
"""
K8SPLIT WRITER - Persistence
----------------------------
Writes one document chunk to its output file. Writes go through a
temporary sibling file and os.replace so a failed write never leaves
a truncated manifest behind.

Author: K8Split Team
Date: 2026-10-18
"""

import os
import logging
import contextlib
from pathlib import Path

from k8split.core.errors import WriteError

logger = logging.getLogger("k8split.writer")

FILE_MODE = 0o644


class ManifestWriter:
    """
    Writes chunks into an existing output directory. Existing files with
    the same name are overwritten.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def write(self, filename: str, chunk: bytes) -> Path:
        """Writes chunk plus a trailing newline to output_dir/filename."""
        target_path = self.output_dir / filename
        self._atomic_write(target_path, chunk + b"\n")
        return target_path

    def _atomic_write(self, target_path: Path, content: bytes):
        temp_file = target_path.with_name(target_path.name + ".k8split.tmp")
        try:
            temp_file.write_bytes(content)
            os.chmod(temp_file, FILE_MODE)
            os.replace(temp_file, target_path)
        except OSError as e:
            with contextlib.suppress(OSError):
                temp_file.unlink(missing_ok=True)
            logger.debug(f"Write to {target_path} failed: {e}")
            raise WriteError(f"error writing file: {target_path} - {e}") from e
