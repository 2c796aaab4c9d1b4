"""The ``file`` data source — host config in, scrubbed state and diagnostics out.

This is a data source rather than a resource: every read writes all declared
files with their current content. File contents are required on each read and
are scrubbed from the echoed state, so they are never diffed across reads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from fastlocal.materializers import get_materializer
from fastlocal.models import (
    Diagnostic,
    FileDataSourceModel,
    FileDataSourceState,
    FileSpec,
    FileState,
    MaterializationRequest,
    MaterializationResult,
    ReadResponse,
)

logger = logging.getLogger(__name__)

WRITE_FAILED_SUMMARY = "Failed to write file."
INVALID_CONFIG_SUMMARY = "Invalid configuration."


class FileDataSource:
    """Writes every configured file on read."""

    name = "file"
    materializer_name = "file"

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_{self.name}"

    def schema(self) -> dict[str, Any]:
        return FileDataSourceModel.model_json_schema()

    def read(self, config: Mapping[str, Any]) -> ReadResponse:
        try:
            plan = FileDataSourceModel.model_validate(dict(config))
        except ValidationError as e:
            return ReadResponse(diagnostics=[_validation_diagnostic(err) for err in e.errors()])

        request = to_request(plan)
        results = get_materializer(self.materializer_name).materialize(request)
        diagnostics = [_write_diagnostic(r) for r in results if not r.ok]
        if diagnostics:
            logger.info("%d of %d file(s) failed to write", len(diagnostics), len(results))

        return ReadResponse(state=scrub(plan), diagnostics=diagnostics)


def to_request(plan: FileDataSourceModel) -> MaterializationRequest:
    return MaterializationRequest(
        files=tuple(FileSpec(filename=f.filename, content=f.file_contents) for f in plan.files),
        append_trailing_newline=bool(plan.add_newline_at_end),
    )


def scrub(plan: FileDataSourceModel) -> FileDataSourceState:
    """Echo the config with every ``file_contents`` dropped."""
    return FileDataSourceState(
        files=[FileState(filename=f.filename) for f in plan.files],
        add_newline_at_end=plan.add_newline_at_end,
    )


def _write_diagnostic(result: MaterializationResult) -> Diagnostic:
    return Diagnostic(summary=WRITE_FAILED_SUMMARY, detail=result.error or "", filename=result.filename)


def _validation_diagnostic(err: Mapping[str, Any]) -> Diagnostic:
    # Never echo err["input"]; it may hold file contents.
    loc = ".".join(str(part) for part in err.get("loc", ()))
    detail = f"{loc}: {err['msg']}" if loc else err["msg"]
    return Diagnostic(summary=INVALID_CONFIG_SUMMARY, detail=detail)
