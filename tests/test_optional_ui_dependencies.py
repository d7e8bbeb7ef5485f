"""Regression tests for running without the optional Rich dependency.

Bootstrap commands and every diagnostic path must keep working with a
plain ``print`` fallback when Rich cannot be imported.
"""

from __future__ import annotations

import sys

import pytest

from gql_introspect.cli import exit_codes
from gql_introspect.cli.app import cli, main
from gql_introspect.cli.console import escape, strip_markup


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_no_args_prints_plain_help(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main([]) == exit_codes.GENERAL_ERROR
    assert "usage:" in capsys.readouterr().err


def test_errors_render_without_markup(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        cli(["https://api.example.com/graphql", "--bogus"])
    assert exc_info.value.code == exit_codes.GENERAL_ERROR

    err = capsys.readouterr().err
    assert "Error: Unknown option: --bogus" in err
    assert "[bold red]" not in err


def test_graphql_errors_kept_verbatim_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    graphql_endpoint,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    graphql_endpoint('{"errors":[{"message":"denied"}]}')

    with pytest.raises(SystemExit):
        cli(["https://api.example.com/graphql"])
    assert '"errors":[{"message":"denied"}]' in capsys.readouterr().err


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape("[bold]") == "[bold]"


class TestStripMarkup:
    def test_removes_tags(self) -> None:
        assert strip_markup("[bold red]Error:[/bold red] boom") == "Error: boom"

    def test_keeps_json_brackets(self) -> None:
        assert strip_markup('[{"a":1}]') == '[{"a":1}]'
