# backend/faultcatalog/schemas/__init__.py
from __future__ import annotations

"""
Result model shared by every operation and the dispatcher.

It is used by:
- faultcatalog.services.operations (operations return OperationResult)
- faultcatalog.services.diagnostics (classification and dispatch)
- the CLI JSON output (FailureSignal.model_dump)

Types:
- FailureKind: closed set of failure categories
- FailureSignal: immutable record of one failure
- Success / Failure: the two variants of OperationResult
- HandledOutcome: what the dispatcher hands back to its caller
"""

import enum
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class FailureKind(str, enum.Enum):
    RESOURCE_NOT_FOUND = "resource-not-found"
    END_OF_STREAM = "end-of-stream"
    MALFORMED_INPUT = "malformed-input"
    INVALID_ARGUMENT = "invalid-argument"
    INVALID_STATE = "invalid-state"
    OUT_OF_RANGE = "out-of-range"
    INVALID_TYPE_CONVERSION = "invalid-type-conversion"
    DOMAIN_SPECIFIC = "domain-specific"


# ---------- Failure signal ----------


class FailureSignal(BaseModel):
    """A classified failure, produced where it happened and handled once."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str
    origin: str


# ---------- Operation results ----------


@dataclass(frozen=True)
class Success:
    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    signal: FailureSignal

    @property
    def ok(self) -> bool:
        return False


OperationResult = Union[Success, Failure]


# ---------- Dispatcher outcome ----------


@dataclass(frozen=True)
class HandledOutcome:
    """
    Result of passing an OperationResult through the dispatcher.

    Either:
    - status "ok" with the operation's value
    OR
    - status "handled" with the failure kind and the report line written
    """

    status: str
    value: Any = None
    kind: FailureKind | None = None
    report: str | None = None

    @classmethod
    def ok(cls, value: Any) -> "HandledOutcome":
        return cls(status="ok", value=value)

    @classmethod
    def handled(cls, kind: FailureKind, report: str) -> "HandledOutcome":
        return cls(status="handled", kind=kind, report=report)

    @property
    def is_handled(self) -> bool:
        return self.status == "handled"
