from __future__ import annotations

"""backend/faultcatalog/services/operations/runtime_operations.py

In-process operations: name resolution, arithmetic, attribute access,
indexing, type checks, bounded values, integer parsing and caller-defined
validation. None of them acquire resources.
"""

import pkgutil
from typing import Any, Sequence

from faultcatalog.config import get_settings
from faultcatalog.errors import ConfigurationError, DomainValidationError
from faultcatalog.schemas import Failure, FailureKind, OperationResult, Success
from faultcatalog.services.diagnostics.error_classifier import (
    failure,
    guard,
    signal_from_exception,
)


def load_named_type(dotted_name: str) -> OperationResult:
    """Resolve ``package.module.Name`` to the object it names."""
    try:
        return Success(pkgutil.resolve_name(dotted_name))
    except (ImportError, AttributeError, ValueError) as exc:
        return Failure(
            signal_from_exception(
                exc, "load_named_type", kind=FailureKind.RESOURCE_NOT_FOUND
            )
        )
    except TypeError as exc:
        return Failure(signal_from_exception(exc, "load_named_type"))


def divide(dividend: float, divisor: float) -> OperationResult:
    try:
        return Success(dividend / divisor)
    except ZeroDivisionError:
        return failure(FailureKind.INVALID_ARGUMENT, "division by zero", "divide")
    except TypeError as exc:
        return Failure(signal_from_exception(exc, "divide"))


def dereference_null(text: str | None) -> OperationResult:
    """Upper-case ``text``; a missing reference surfaces as invalid-state."""
    try:
        return Success(text.upper())
    except AttributeError as exc:
        return Failure(
            signal_from_exception(exc, "dereference_null", kind=FailureKind.INVALID_STATE)
        )
    except TypeError as exc:
        return Failure(signal_from_exception(exc, "dereference_null"))


def index_access(sequence: Sequence[Any], index: int) -> OperationResult:
    """Return ``sequence[index]``.

    Only ``0 <= index < len(sequence)`` is in range; negative indices are
    rejected instead of counting from the end.
    """
    try:
        if index < 0:
            raise IndexError(index)
        return Success(sequence[index])
    except (IndexError, KeyError):
        return failure(
            FailureKind.OUT_OF_RANGE,
            f"index {index} out of range for length {len(sequence)}",
            "index_access",
        )
    except TypeError as exc:
        # non-integer index, or an object that cannot be indexed
        return Failure(signal_from_exception(exc, "index_access"))


def type_cast(value: Any, target_type: type) -> OperationResult:
    """Return ``value`` unchanged if it is already a ``target_type``."""
    try:
        matches = isinstance(value, target_type)
    except TypeError as exc:
        return Failure(signal_from_exception(exc, "type_cast"))
    if matches:
        return Success(value)
    return failure(
        FailureKind.INVALID_TYPE_CONVERSION,
        f"cannot cast {type(value).__name__} to {getattr(target_type, '__name__', target_type)}",
        "type_cast",
    )


def _priority_bounds(minimum: int | None, maximum: int | None) -> tuple[int, int]:
    if minimum is not None and maximum is not None:
        return minimum, maximum
    settings = get_settings()
    low = settings.priority_min if minimum is None else minimum
    high = settings.priority_max if maximum is None else maximum
    return low, high


def set_priority(
    value: int,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> OperationResult:
    """Accept ``value`` if it lies in ``[minimum, maximum]``.

    Bounds default to Settings.priority_min / priority_max (1 and 10).
    Unusable settings are reported as invalid-state.
    """
    try:
        low, high = _priority_bounds(minimum, maximum)
    except ConfigurationError as exc:
        return Failure(
            signal_from_exception(exc, "set_priority", kind=FailureKind.INVALID_STATE)
        )
    try:
        in_range = low <= value <= high
    except TypeError as exc:
        return Failure(signal_from_exception(exc, "set_priority"))
    if not in_range:
        return failure(
            FailureKind.INVALID_ARGUMENT,
            f"priority {value} outside accepted range [{low}, {high}]",
            "set_priority",
        )
    return Success(value)


def parse_integer(text: str) -> OperationResult:
    try:
        return Success(int(text, 10))
    except (TypeError, ValueError) as exc:
        return Failure(
            signal_from_exception(exc, "parse_integer", kind=FailureKind.MALFORMED_INPUT)
        )


def _require(condition: bool, message: str) -> bool:
    if not condition:
        raise DomainValidationError(message)
    return True


def custom_validation(condition: bool, message: str) -> OperationResult:
    """Fail with a domain-specific signal carrying ``message`` when ``condition`` is false."""
    return guard("custom_validation", _require, condition, message)
