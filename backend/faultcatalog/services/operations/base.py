from __future__ import annotations

"""backend/faultcatalog/services/operations/base.py

Shared pieces for the demonstrated operations.

This module provides:

- Demonstration: a named, zero-argument scenario bound to its trigger input

Concrete operations (io_operations, runtime_operations) catch their own
failures and return an OperationResult; they never raise to the caller.
"""

from dataclasses import dataclass
from typing import Callable

from faultcatalog.schemas import OperationResult


@dataclass(frozen=True)
class Demonstration:
    """One catalog entry: the operation name and how to trigger it."""

    name: str
    trigger: Callable[[], OperationResult]
    description: str = ""

    def run(self) -> OperationResult:
        return self.trigger()
