"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

import fastlocal.materializers.file as file_materializer


@pytest.fixture
def unix_newlines(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the line terminator to ``\\n`` regardless of the host platform."""
    monkeypatch.setattr(file_materializer, "platform_line_ending", lambda platform=None: "\n")
    return "\n"


@pytest.fixture
def windows_newlines(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(file_materializer, "platform_line_ending", lambda platform=None: "\r\n")
    return "\r\n"


@pytest.fixture
def missing_dir(tmp_path: Path) -> Path:
    """A directory path that does not exist."""
    return tmp_path / "does" / "not" / "exist"


@pytest.fixture(autouse=True)
def reset_fastlocal_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so tests stay independent."""
    logger = logging.getLogger("fastlocal")
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
