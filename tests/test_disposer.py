"""Tests for sink routing (cli/disposer.py) and the file sink.

Coverage:
* Print mode writes the exact body to stdout.
* File mode overwrites the target and confirms on stderr.
* Clipboard mode copies via the detected sink.
* Clipboard fallback to stdout when nothing is detected.
* Write failures mapped to ``OutputWriteError``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gql_introspect.cli.disposer import dispose_response
from gql_introspect.core.models import InvocationConfig, OutputMode
from gql_introspect.exceptions import ClipboardError, OutputWriteError, UsageError
from gql_introspect.infra.file_sink import write_response_file

URL = "https://api.example.com/graphql"
BODY = '{"data":{"__schema":{"queryType":{"name":"Query"}}}}'


def _config(mode: OutputMode, output_file: str | None = None) -> InvocationConfig:
    return InvocationConfig(endpoint=URL, output_mode=mode, output_file=output_file)


# ---------------------------------------------------------------------------
# Print
# ---------------------------------------------------------------------------

class TestPrintMode:
    def test_exact_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        dispose_response(_config(OutputMode.PRINT), BODY)
        captured = capsys.readouterr()
        assert captured.out == BODY
        assert captured.err == ""


# ---------------------------------------------------------------------------
# File
# ---------------------------------------------------------------------------

class TestFileMode:
    def test_writes_exact_body(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        target = tmp_path / "schema.json"
        dispose_response(_config(OutputMode.FILE, str(target)), BODY)

        assert target.read_bytes() == BODY.encode("utf-8")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "saved to" in captured.err
        assert "schema.json" in captured.err

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "schema.json"
        target.write_text("old content that is longer than the new one" * 10)
        dispose_response(_config(OutputMode.FILE, str(target)), BODY)
        assert target.read_text(encoding="utf-8") == BODY

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "missing" / "schema.json"
        with pytest.raises(OutputWriteError, match="Could not write"):
            dispose_response(_config(OutputMode.FILE, str(target)), BODY)
        assert not target.parent.exists()


class TestWriteResponseFile:
    def test_no_newline_translation(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"
        write_response_file(target, "a\nb\r\nc")
        assert target.read_bytes() == b"a\nb\r\nc"

    def test_returns_path(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"
        assert write_response_file(str(target), BODY) == target


# ---------------------------------------------------------------------------
# Clipboard
# ---------------------------------------------------------------------------

class TestClipboardMode:
    def test_copies_via_detected_sink(self, capsys: pytest.CaptureFixture[str]) -> None:
        sink = MagicMock()
        dispose_response(
            _config(OutputMode.CLIPBOARD), BODY, clipboard_detector=lambda: sink,
        )

        sink.copy.assert_called_once_with(BODY)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "copied to clipboard" in captured.err

    def test_fallback_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        dispose_response(
            _config(OutputMode.CLIPBOARD), BODY, clipboard_detector=lambda: None,
        )

        captured = capsys.readouterr()
        assert captured.out == BODY
        assert "No clipboard utility found" in captured.err
        assert "Falling back to printing to stdout" in captured.err

    def test_default_detector_fallback(
        self, no_clipboard: None, capsys: pytest.CaptureFixture[str],
    ) -> None:
        dispose_response(_config(OutputMode.CLIPBOARD), BODY)
        assert capsys.readouterr().out == BODY

    def test_sink_failure_propagates(self, capsys: pytest.CaptureFixture[str]) -> None:
        sink = MagicMock()
        sink.copy.side_effect = ClipboardError("xclip exited with status 1")

        with pytest.raises(ClipboardError):
            dispose_response(
                _config(OutputMode.CLIPBOARD), BODY, clipboard_detector=lambda: sink,
            )
        assert capsys.readouterr().out == ""


class TestFileModeWithoutPath:
    def test_missing_path_is_usage_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        config = _config(OutputMode.FILE, "schema.json")
        object.__setattr__(config, "output_file", None)

        with pytest.raises(UsageError, match="output file path"):
            dispose_response(config, BODY)
        assert capsys.readouterr().out == ""
