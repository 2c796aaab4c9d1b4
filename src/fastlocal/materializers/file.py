"""File materializer — writes each declared file to local disk."""

from __future__ import annotations

import logging
import os
import sys

from fastlocal.materializers.base import BaseMaterializer, register_materializer
from fastlocal.models import FileSpec, MaterializationRequest, MaterializationResult

logger = logging.getLogger(__name__)

FILE_MODE = 0o644
_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)


def platform_line_ending(platform: str | None = None) -> str:
    """Return the line terminator for the target platform."""
    platform = platform if platform is not None else sys.platform
    return "\r\n" if platform.startswith("win") else "\n"


def normalize_content(content: str, line_ending: str, append_trailing_newline: bool) -> str:
    """Append ``line_ending`` unless disabled or already present."""
    if append_trailing_newline and not content.endswith(line_ending):
        return content + line_ending
    return content


def write_file(filename: str, data: bytes) -> None:
    """Create or truncate ``filename`` and write ``data`` in full."""
    fd = os.open(filename, _OPEN_FLAGS, FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


@register_materializer
class FileMaterializer(BaseMaterializer):
    name = "file"
    description = "Writes each file to local disk, always overwriting"

    def materialize(self, request: MaterializationRequest) -> list[MaterializationResult]:
        line_ending = platform_line_ending()
        results = [
            self._materialize_one(spec, line_ending, request.append_trailing_newline)
            for spec in request.files
        ]
        failed = sum(1 for r in results if not r.ok)
        logger.info("Materialized %d file(s), %d failed", len(results) - failed, failed)
        return results

    def _materialize_one(
        self, spec: FileSpec, line_ending: str, append_trailing_newline: bool,
    ) -> MaterializationResult:
        # Overwrite unconditionally; no read-and-compare first.
        try:
            data = normalize_content(spec.content, line_ending, append_trailing_newline).encode("utf-8")
            write_file(spec.filename, data)
        except (OSError, ValueError) as e:  # ValueError: lone surrogate in content, null byte in path
            logger.warning("Failed to write %s: %s", spec.filename, e)
            return MaterializationResult(filename=spec.filename, error=str(e))
        logger.debug("Wrote %d bytes to %s", len(data), spec.filename)
        return MaterializationResult(filename=spec.filename)
