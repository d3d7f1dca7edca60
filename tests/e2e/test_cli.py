"""End-to-end CLI coverage for the commands exposed by lib_variadic_args.

The tests exercise the default invocation (full demonstration), the
subcommands, and the shared exit handling provided by ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_variadic_args import cli
from lib_variadic_args.domain.errors import AmbiguousOverloadError
from tests.support import EXPECTED_OUTPUT


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_without_subcommand_runs_demo() -> None:
    result = _runner().invoke(cli.cli, [])
    assert result.exit_code == 0
    assert result.output == EXPECTED_OUTPUT


def test_cli_run_selected_section() -> None:
    result = _runner().invoke(cli.cli, ["run", "--section", "mixed"])
    assert result.exit_code == 0
    assert result.output == "Multiple parameters including varargs\na = 1\nb = 2\nNumber of arguments: 3\n1 2 3\n\n"


def test_cli_run_rejects_unknown_section() -> None:
    result = _runner().invoke(cli.cli, ["run", "--section", "nope"])
    assert result.exit_code != 0
    assert "nope" in result.output


def test_cli_sections_lists_titles() -> None:
    result = _runner().invoke(cli.cli, ["sections"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("old-style")
    assert lines[-1].endswith("Overloading varargs")


def test_cli_signatures_lists_overloads() -> None:
    result = _runner().invoke(cli.cli, ["signatures"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "varargs_test3(int...)",
        "varargs_test3(bool...)",
        "varargs_test3(str, int...)",
    ]


def test_cli_ambiguity_command_fails() -> None:
    result = _runner().invoke(cli.cli, ["ambiguity"])
    assert result.exit_code != 0
    assert isinstance(result.exception, AmbiguousOverloadError)
    assert "(int...) and (int, int...)" in str(result.exception)


def test_cli_main_reports_ambiguity_exit_code() -> None:
    assert cli.main(["ambiguity"]) != 0


def test_cli_main_default_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_cli_info_handles_missing_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    """`cli info` must degrade gracefully when package metadata is unavailable."""

    def _raise_pkg_not_found(*_args, **_kwargs):
        raise cli.metadata.PackageNotFoundError()

    monkeypatch.setattr(cli.metadata, "metadata", _raise_pkg_not_found)
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "metadata unavailable" in result.output


def test_cli_main_restores_traceback_flag() -> None:
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    exit_code = cli.main(["--traceback", "sections"], restore_traceback=True)
    assert exit_code == 0
    assert getattr(lib_cli_exit_tools.config, "traceback", False) == previous_traceback


def test_cli_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(cli, "configure_logging", calls.append)
    result = _runner().invoke(cli.cli, ["sections"], env={cli.LOG_LEVEL_ENVVAR: "debug"})
    assert result.exit_code == 0
    assert calls == ["debug"]
