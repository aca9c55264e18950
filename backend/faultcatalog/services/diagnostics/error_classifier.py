from __future__ import annotations

"""backend/faultcatalog/services/diagnostics/error_classifier.py

Centralized classification of caught exceptions.

This module looks at an exception instance and assigns a stable
FailureKind. The classification is:
- deterministic (ordered isinstance checks, first match wins)
- total (never returns None; unknown exceptions become invalid-state)

Operations that know better than the generic mapping (for example the
connect scenario, where an OSError means a bad target rather than a
missing file) pass an explicit kind to signal_from_exception.
"""

import logging
from typing import Any, Callable

from faultcatalog.errors import DomainValidationError
from faultcatalog.schemas import (
    Failure,
    FailureKind,
    FailureSignal,
    OperationResult,
    Success,
)

logger = logging.getLogger(__name__)


def classify_exception(exc: BaseException) -> FailureKind:
    """Classify an exception into a FailureKind."""
    # 1) Caller-defined preconditions
    if isinstance(exc, DomainValidationError):
        return FailureKind.DOMAIN_SPECIFIC

    # 2) Exhausted streams
    if isinstance(exc, EOFError):
        return FailureKind.END_OF_STREAM

    # 3) Missing files, modules and named types
    if isinstance(exc, (FileNotFoundError, ImportError)):
        return FailureKind.RESOURCE_NOT_FOUND

    # 4) Lookups outside the container
    if isinstance(exc, (IndexError, KeyError)):
        return FailureKind.OUT_OF_RANGE

    # 5) Arithmetic on an unacceptable operand
    if isinstance(exc, ZeroDivisionError):
        return FailureKind.INVALID_ARGUMENT

    # 6) Wrong runtime type
    if isinstance(exc, TypeError):
        return FailureKind.INVALID_TYPE_CONVERSION

    # 7) Values that do not parse (includes UnicodeError)
    if isinstance(exc, ValueError):
        return FailureKind.MALFORMED_INPUT

    # 8) Anything else means the program was in a state it did not expect
    return FailureKind.INVALID_STATE


def _message_for(exc: BaseException) -> str:
    if isinstance(exc, KeyError) and exc.args:
        # KeyError's str() wraps the key in quotes
        return f"key not found: {exc.args[0]!r}"
    return str(exc) or type(exc).__name__


def failure(kind: FailureKind, message: str, origin: str) -> Failure:
    """Wrap a freshly built FailureSignal in a Failure."""
    return Failure(FailureSignal(kind=kind, message=message, origin=origin))


def signal_from_exception(
    exc: BaseException,
    origin: str,
    kind: FailureKind | None = None,
) -> FailureSignal:
    """Build a FailureSignal for ``exc`` raised inside ``origin``."""
    return FailureSignal(
        kind=kind or classify_exception(exc),
        message=_message_for(exc),
        origin=origin,
    )


def guard(origin: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> OperationResult:
    """Run ``func`` and return its value as Success, or a classified Failure.

    Only Exception subclasses are caught; KeyboardInterrupt and SystemExit
    still propagate.
    """
    try:
        value = func(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001
        signal = signal_from_exception(exc, origin)
        logger.debug("%s raised %s, classified as %s", origin, type(exc).__name__, signal.kind.value)
        return Failure(signal)
    return Success(value)
