"""Exception types raised outside the per-file write path."""

from __future__ import annotations

from pathlib import Path


class FastLocalError(Exception):
    """Base for fastlocal errors."""


class ConfigError(FastLocalError):
    """A configuration file could not be read or parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
