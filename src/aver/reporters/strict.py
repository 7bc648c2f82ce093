from __future__ import annotations

import logging

from aver.errors import BlockBodyError
from aver.outcome import BlockOutcome
from aver.reporters.aggregating import AggregatingReporter


class StrictReporter(AggregatingReporter):
    """Fail-fast on body errors; checks are still deferred to finalize."""

    def record_block_outcome(self, outcome: BlockOutcome) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"block outcome: {outcome.describe()}")
        if outcome.is_error:
            raise BlockBodyError(outcome.payload)

    def reporter_type(self) -> str:
        return "strict"
