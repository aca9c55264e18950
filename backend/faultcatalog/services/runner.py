from __future__ import annotations

"""backend/faultcatalog/services/runner.py

Sequential demonstration runner.

Responsibilities:
- Run each Demonstration in the order given, one at a time
- Pass every OperationResult through the dispatcher
- Collect the HandledOutcomes into a RunSummary

Handled failures are the expected result and never stop the run. An
exception escaping an operation means the operation is broken; it is
logged and re-raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from faultcatalog.schemas import HandledOutcome
from faultcatalog.services.diagnostics.dispatcher import (
    Renderer,
    Sink,
    format_report,
    handle,
)
from faultcatalog.services.operations import Demonstration, get_default_demonstrations

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    outcomes: list[HandledOutcome] = field(default_factory=list)

    @property
    def handled_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.is_handled)

    @property
    def ok_count(self) -> int:
        return len(self.outcomes) - self.handled_count


def run_demonstrations(
    demonstrations: Iterable[Demonstration] | None = None,
    sink: Sink | None = None,
    render: Renderer = format_report,
) -> RunSummary:
    """Run demonstrations (the default catalog when None) through the dispatcher."""
    if demonstrations is None:
        demonstrations = get_default_demonstrations()

    summary = RunSummary()
    for demo in demonstrations:
        logger.info("Running %s", demo.name)
        try:
            result = demo.run()
        except Exception:
            logger.exception("Demonstration %s raised instead of returning a result", demo.name)
            raise
        summary.outcomes.append(handle(result, sink, render))

    logger.info(
        "Finished: %d handled, %d ok", summary.handled_count, summary.ok_count
    )
    return summary
