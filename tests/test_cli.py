from __future__ import annotations

import json
import runpy

import pytest

from faultcatalog.main import EXIT_CONFIG_ERROR, EXIT_OK, main

pytestmark = pytest.mark.integration


def test_cli_prints_one_line_per_failure_and_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == EXIT_OK

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 12
    assert out[0].startswith("resource-not-found caught: ")
    assert "invalid-argument caught: division by zero" in out
    assert out[-1] == "domain-specific caught: This is a custom exception!"


def test_cli_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json"]) == EXIT_OK

    records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert len(records) == 12
    assert records[5] == {
        "kind": "invalid-argument",
        "message": "division by zero",
        "origin": "divide",
    }
    assert {r["kind"] for r in records} == {
        "resource-not-found",
        "end-of-stream",
        "malformed-input",
        "invalid-argument",
        "invalid-state",
        "out-of-range",
        "invalid-type-conversion",
        "domain-specific",
    }


def test_cli_accepts_lowercase_log_level(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "info"]) == EXIT_OK


def test_cli_configuration_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("FAULTCATALOG_PRIORITY_MIN", "9")
    monkeypatch.setenv("FAULTCATALOG_PRIORITY_MAX", "1")

    assert main([]) == EXIT_CONFIG_ERROR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err
    assert "hint:" in captured.err


def test_module_entry_point(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["faultcatalog"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("faultcatalog", run_name="__main__")

    assert excinfo.value.code == 0
    assert len(capsys.readouterr().out.splitlines()) == 12
