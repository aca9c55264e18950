from __future__ import annotations

"""backend/faultcatalog/services/operations/io_operations.py

Operations that acquire an external resource: files, byte streams and
URLs. Every resource is opened in a ``with`` block, so it is released on
the failure path as well as the success path.

Failure kinds produced:
- open_and_read_file / open_input_stream: resource-not-found
- read_past_end_of_stream: end-of-stream
- connect_to_external_resource: malformed-input
"""

import http.client
import io
import logging
import os
import urllib.request
from typing import Any, Callable

from faultcatalog.config import get_settings
from faultcatalog.errors import ConfigurationError
from faultcatalog.schemas import Failure, FailureKind, OperationResult, Success
from faultcatalog.services.diagnostics.error_classifier import (
    failure,
    signal_from_exception,
)

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


def open_and_read_file(
    path: PathLike,
    *,
    encoding: str = "utf-8",
    opener: Callable[..., Any] = open,
) -> OperationResult:
    """Read a whole text file.

    ``opener`` defaults to the builtin ``open``; any callable returning a
    context-managed handle works.
    """
    try:
        with opener(path, "r", encoding=encoding) as handle:
            return Success(handle.read())
    except (OSError, ValueError, TypeError) as exc:
        # FileNotFoundError -> resource-not-found, decode errors -> malformed-input
        return Failure(signal_from_exception(exc, "open_and_read_file"))


def open_input_stream(path: PathLike, size: int = -1) -> OperationResult:
    """Open ``path`` as a binary stream and read up to ``size`` bytes (all by default)."""
    try:
        with open(path, "rb") as stream:
            return Success(stream.read(size))
    except (OSError, TypeError) as exc:
        return Failure(signal_from_exception(exc, "open_input_stream"))


def _read_exact(stream: io.BufferedIOBase, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) < size:
        raise EOFError(f"expected {size} bytes, stream ended after {len(chunk)}")
    return chunk


def read_past_end_of_stream(data: bytes, size: int) -> OperationResult:
    """Read exactly ``size`` bytes from an in-memory stream over ``data``."""
    try:
        if size < 0:
            return failure(
                FailureKind.INVALID_ARGUMENT,
                f"size must be non-negative, got {size}",
                "read_past_end_of_stream",
            )
        with io.BytesIO(data) as stream:
            return Success(_read_exact(stream, size))
    except (EOFError, TypeError) as exc:
        return Failure(signal_from_exception(exc, "read_past_end_of_stream"))


def connect_to_external_resource(url: str, timeout: float | None = None) -> OperationResult:
    """Open ``url`` and return the response body.

    A malformed URL, an unsupported scheme, an unreachable target and a
    peer that does not speak HTTP are all reported as malformed-input.
    """
    if timeout is None:
        try:
            timeout = get_settings().connect_timeout_seconds
        except ConfigurationError as exc:
            return Failure(
                signal_from_exception(
                    exc,
                    "connect_to_external_resource",
                    kind=FailureKind.INVALID_STATE,
                )
            )
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            return Success(response.read())
    except (ValueError, OSError, http.client.HTTPException) as exc:
        logger.debug("connect to %r failed: %s", url, exc)
        return Failure(
            signal_from_exception(
                exc,
                "connect_to_external_resource",
                kind=FailureKind.MALFORMED_INPUT,
            )
        )
