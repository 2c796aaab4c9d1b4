"""Pydantic data models for fastlocal."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FileSpec(BaseModel):
    """A single declared file. Content is write-only and never serialized."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: str = Field(repr=False, exclude=True)


class MaterializationRequest(BaseModel):
    """An ordered batch of files to write in one invocation."""

    model_config = ConfigDict(frozen=True)

    files: tuple[FileSpec, ...] = ()
    append_trailing_newline: bool = False


class MaterializationResult(BaseModel):
    """Outcome for one file: written, or failed with the OS error text."""

    filename: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ── Host-facing models ───────────────────────────────────


class FileModel(BaseModel):
    """One entry of the ``files`` attribute as the host configures it."""

    model_config = ConfigDict(extra="forbid")

    filename: str = Field(description="Filename to create.")
    file_contents: str = Field(
        repr=False,
        description="Text to put in the file",
        json_schema_extra={"sensitive": True},
    )


class FileDataSourceModel(BaseModel):
    """Configuration accepted by the ``file`` data source."""

    model_config = ConfigDict(extra="forbid")

    files: list[FileModel]
    add_newline_at_end: bool | None = None


class FileState(BaseModel):
    """Echoed file entry. ``file_contents`` is always scrubbed to null."""

    filename: str
    file_contents: None = None


class FileDataSourceState(BaseModel):
    """State handed back to the host for persistence."""

    files: list[FileState] = Field(default_factory=list)
    add_newline_at_end: bool | None = None


class Diagnostic(BaseModel):
    """An error surfaced to the host alongside the response."""

    summary: str
    detail: str = ""
    filename: str | None = None


class ReadResponse(BaseModel):
    """Result of a data source read: scrubbed state plus diagnostics."""

    state: FileDataSourceState | None = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def has_error(self) -> bool:
        return bool(self.diagnostics)

