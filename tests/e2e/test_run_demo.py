from __future__ import annotations

import logging

import pytest

from lib_variadic_args import UnknownSectionError, run_demo, section_names
from lib_variadic_args.testing import RecordingWriter
from tests.support import EXPECTED_OUTPUT


def test_run_demo_writes_full_transcript() -> None:
    writer = RecordingWriter()
    run_demo(writer=writer)
    assert writer.text == EXPECTED_OUTPUT


def test_run_demo_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    run_demo()
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_selected_sections_run_in_canonical_order() -> None:
    writer = RecordingWriter()
    run_demo(["mixed", "old-style"], writer=writer)
    titles = [line for line in writer.lines if line in {"'Old style' approach to varargs", "Multiple parameters including varargs"}]
    assert titles == ["'Old style' approach to varargs", "Multiple parameters including varargs"]
    assert "Varargs approach" not in writer.lines


def test_unknown_section_writes_nothing() -> None:
    writer = RecordingWriter()
    with pytest.raises(UnknownSectionError, match="unknown section"):
        run_demo(["missing"], writer=writer)
    assert writer.lines == []


def test_run_demo_logs_progress(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_variadic_args")
    run_demo(["overloading"], writer=RecordingWriter())
    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == "demo_started"
    assert messages[-1] == "demo_finished"
    assert messages.count("overload_resolved") == 3
    assert "section_started" in messages


def test_section_names() -> None:
    assert section_names() == ("old-style", "varargs", "mixed", "overloading")
