from __future__ import annotations

import pytest

from faultcatalog.schemas import FailureKind, Success
from faultcatalog.services.operations import Demonstration, get_default_demonstrations
from faultcatalog.services.runner import run_demonstrations

pytestmark = pytest.mark.unit

EXPECTED_ORDER = [
    ("open_and_read_file", FailureKind.RESOURCE_NOT_FOUND),
    ("open_input_stream", FailureKind.RESOURCE_NOT_FOUND),
    ("read_past_end_of_stream", FailureKind.END_OF_STREAM),
    ("connect_to_external_resource", FailureKind.MALFORMED_INPUT),
    ("load_named_type", FailureKind.RESOURCE_NOT_FOUND),
    ("divide", FailureKind.INVALID_ARGUMENT),
    ("dereference_null", FailureKind.INVALID_STATE),
    ("index_access", FailureKind.OUT_OF_RANGE),
    ("type_cast", FailureKind.INVALID_TYPE_CONVERSION),
    ("set_priority", FailureKind.INVALID_ARGUMENT),
    ("parse_integer", FailureKind.MALFORMED_INPUT),
    ("custom_validation", FailureKind.DOMAIN_SPECIFIC),
]


def test_default_catalog_order() -> None:
    assert [demo.name for demo in get_default_demonstrations()] == [
        name for name, _ in EXPECTED_ORDER
    ]


def test_every_demonstration_triggers_its_kind() -> None:
    for demo, (name, kind) in zip(get_default_demonstrations(), EXPECTED_ORDER):
        result = demo.run()
        assert result.ok is False, name
        assert result.signal.kind is kind, name
        assert result.signal.origin == name


def test_run_handles_every_failure(lines: list[str]) -> None:
    summary = run_demonstrations(sink=lines.append)

    assert summary.handled_count == 12
    assert summary.ok_count == 0
    assert len(lines) == 12
    assert [o.kind for o in summary.outcomes] == [kind for _, kind in EXPECTED_ORDER]
    for line, (_, kind) in zip(lines, EXPECTED_ORDER):
        assert line.startswith(f"{kind.value} caught: ")


def test_run_report_lines(lines: list[str]) -> None:
    run_demonstrations(sink=lines.append)

    assert "end-of-stream caught: expected 4 bytes, stream ended after 0" in lines
    assert "invalid-argument caught: division by zero" in lines
    assert "out-of-range caught: index 5 out of range for length 3" in lines
    assert "invalid-type-conversion caught: cannot cast str to int" in lines
    assert "invalid-argument caught: priority 11 outside accepted range [1, 10]" in lines
    assert lines[-1] == "domain-specific caught: This is a custom exception!"


def test_run_counts_successes(lines: list[str]) -> None:
    demos = [
        Demonstration("ok", lambda: Success("value")),
        get_default_demonstrations()[5],
    ]

    summary = run_demonstrations(demos, sink=lines.append)

    assert summary.ok_count == 1
    assert summary.handled_count == 1
    assert summary.outcomes[0].value == "value"
    assert lines == ["invalid-argument caught: division by zero"]


def test_run_propagates_broken_demonstration(lines: list[str]) -> None:
    def broken():
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError, match="bug"):
        run_demonstrations([Demonstration("broken", broken)], sink=lines.append)
