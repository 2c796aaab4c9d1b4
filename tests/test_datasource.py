"""Tests for the file data source."""

import json
import logging
from pathlib import Path

import pytest

from fastlocal.datasource import (
    INVALID_CONFIG_SUMMARY,
    WRITE_FAILED_SUMMARY,
    FileDataSource,
    scrub,
    to_request,
)
from fastlocal.models import FileDataSourceModel


def _config(*files: tuple[Path, str], newline: bool | None = None) -> dict:
    config: dict = {"files": [{"filename": str(n), "file_contents": c} for n, c in files]}
    if newline is not None:
        config["add_newline_at_end"] = newline
    return config


class TestTypeNameAndSchema:
    def test_type_name(self) -> None:
        assert FileDataSource().type_name("fastlocal") == "fastlocal_file"

    def test_schema_has_attributes(self) -> None:
        schema = FileDataSource().schema()
        assert set(schema["properties"]) == {"files", "add_newline_at_end"}


class TestConversion:
    def test_missing_newline_flag_means_false(self) -> None:
        plan = FileDataSourceModel.model_validate({"files": [{"filename": "a", "file_contents": "x"}]})
        request = to_request(plan)
        assert request.append_trailing_newline is False
        assert request.files[0].content == "x"

    def test_scrub_drops_contents(self) -> None:
        plan = FileDataSourceModel.model_validate(
            {"files": [{"filename": "a", "file_contents": "s3cret"}], "add_newline_at_end": True},
        )
        state = scrub(plan)
        assert state.files[0].filename == "a"
        assert state.files[0].file_contents is None
        assert state.add_newline_at_end is True
        assert "s3cret" not in state.model_dump_json()


@pytest.mark.usefixtures("unix_newlines")
class TestRead:
    def test_writes_files_and_scrubs_state(self, tmp_path: Path) -> None:
        a, b = tmp_path / "a.txt", tmp_path / "b.txt"
        response = FileDataSource().read(_config((a, "hello"), (b, "world\n"), newline=True))

        assert not response.has_error()
        assert a.read_bytes() == b"hello\n"
        assert b.read_bytes() == b"world\n"
        assert response.state is not None
        assert [f.filename for f in response.state.files] == [str(a), str(b)]
        assert all(f.file_contents is None for f in response.state.files)
        dumped = response.model_dump_json()
        assert "hello" not in dumped
        assert "world" not in dumped

    def test_one_diagnostic_per_failed_file(self, tmp_path: Path, missing_dir: Path) -> None:
        ok = tmp_path / "ok.txt"
        response = FileDataSource().read(_config(
            (missing_dir / "x.txt", "x"),
            (ok, "fine"),
            (missing_dir / "y.txt", "y"),
        ))

        assert response.has_error()
        assert [d.filename for d in response.diagnostics] == [
            str(missing_dir / "x.txt"),
            str(missing_dir / "y.txt"),
        ]
        assert all(d.summary == WRITE_FAILED_SUMMARY for d in response.diagnostics)
        assert all(d.detail for d in response.diagnostics)
        assert ok.read_bytes() == b"fine"
        # State is still echoed for the whole list.
        assert response.state is not None
        assert len(response.state.files) == 3

    def test_invalid_config_writes_nothing(self, tmp_path: Path) -> None:
        target = tmp_path / "a.txt"
        response = FileDataSource().read({"files": [{"filename": str(target)}]})
        assert response.state is None
        assert response.has_error()
        assert response.diagnostics[0].summary == INVALID_CONFIG_SUMMARY
        assert "file_contents" in response.diagnostics[0].detail
        assert not target.exists()

    def test_invalid_config_does_not_echo_contents(self) -> None:
        response = FileDataSource().read({"files": [{"filename": 7, "file_contents": "s3cret"}]})
        assert response.state is None
        assert response.has_error()
        assert "s3cret" not in response.model_dump_json()

    def test_empty_filename_fails_only_that_file(self, tmp_path: Path) -> None:
        after = tmp_path / "after.txt"
        config = _config((after, "ok"))
        config["files"].insert(0, {"filename": "", "file_contents": "x"})

        response = FileDataSource().read(config)

        assert response.state is not None
        assert [d.summary for d in response.diagnostics] == [WRITE_FAILED_SUMMARY]
        assert response.diagnostics[0].filename == ""
        assert after.read_bytes() == b"ok"

    def test_unencodable_contents_fail_only_that_file(self, tmp_path: Path) -> None:
        bad, after = tmp_path / "bad.txt", tmp_path / "after.txt"
        config = json.loads(json.dumps(_config((bad, "\ud800"), (after, "ok"))))

        response = FileDataSource().read(config)

        assert [d.filename for d in response.diagnostics] == [str(bad)]
        assert response.diagnostics[0].summary == WRITE_FAILED_SUMMARY
        assert after.read_bytes() == b"ok"

    def test_contents_never_logged(self, tmp_path: Path, missing_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="fastlocal"):
            FileDataSource().read(_config((tmp_path / "a.txt", "s3cret"), (missing_dir / "b", "s3cret")))
        assert caplog.records
        assert "s3cret" not in caplog.text
