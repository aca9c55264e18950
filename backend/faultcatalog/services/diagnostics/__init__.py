from __future__ import annotations

"""
Diagnostics: failure classification and dispatch.

This package provides:
- error_classifier: map caught exceptions to a stable FailureKind and
  build FailureSignal records from them
- dispatcher: turn an OperationResult into a HandledOutcome, writing one
  report line per failure

The goal is to keep error handling logic centralized and deterministic.
"""

from .dispatcher import format_json, format_report, handle  # noqa: F401
from .error_classifier import (  # noqa: F401
    classify_exception,
    failure,
    guard,
    signal_from_exception,
)
