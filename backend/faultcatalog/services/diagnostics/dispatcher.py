"""Single handling layer for operation results.

Every FailureKind has exactly one report template. The table is checked
against the enum when this module is imported, so adding a kind without a
template is an import-time error rather than a silent fallthrough.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Callable

from faultcatalog.schemas import (
    Failure,
    FailureKind,
    FailureSignal,
    HandledOutcome,
    OperationResult,
    Success,
)

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]
Renderer = Callable[[FailureSignal], str]

REPORT_TEMPLATES: dict[FailureKind, str] = {
    FailureKind.RESOURCE_NOT_FOUND: "resource-not-found caught: {message}",
    FailureKind.END_OF_STREAM: "end-of-stream caught: {message}",
    FailureKind.MALFORMED_INPUT: "malformed-input caught: {message}",
    FailureKind.INVALID_ARGUMENT: "invalid-argument caught: {message}",
    FailureKind.INVALID_STATE: "invalid-state caught: {message}",
    FailureKind.OUT_OF_RANGE: "out-of-range caught: {message}",
    FailureKind.INVALID_TYPE_CONVERSION: "invalid-type-conversion caught: {message}",
    FailureKind.DOMAIN_SPECIFIC: "domain-specific caught: {message}",
}

_missing = set(FailureKind) - set(REPORT_TEMPLATES)
if _missing:
    raise RuntimeError(
        "No report template for: " + ", ".join(sorted(k.value for k in _missing))
    )


def stdout_sink(line: str) -> None:
    sys.stdout.write(line + "\n")


def format_report(signal: FailureSignal) -> str:
    """Render ``signal`` as ``"<kind> caught: <message>"``."""
    return REPORT_TEMPLATES[signal.kind].format(message=signal.message)


def format_json(signal: FailureSignal) -> str:
    """Render ``signal`` as a single-line JSON object."""
    return json.dumps(signal.model_dump(mode="json"))


def handle(
    result: OperationResult,
    sink: Sink | None = None,
    render: Renderer = format_report,
) -> HandledOutcome:
    """Route an OperationResult to its outcome.

    Success passes its value through untouched and writes nothing.
    Failure writes exactly one line to ``sink`` (stdout by default),
    rendered by ``render`` (the "<kind> caught: <message>" report by default).
    """
    if isinstance(result, Success):
        return HandledOutcome.ok(result.value)
    if not isinstance(result, Failure):
        raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")

    signal = result.signal
    report = render(signal)
    (sink or stdout_sink)(report)
    logger.debug("Handled %s from %s", signal.kind.value, signal.origin)
    return HandledOutcome.handled(signal.kind, report)
