from __future__ import annotations

import logging

from aver.errors import BlockFailure
from aver.outcome import BlockOutcome, CheckOutcome
from aver.reporters.base import Reporter


class AggregatingReporter(Reporter):
    """The default policy: defer everything to finalize.

    A block fails if any check terminated abnormally or its body returned an
    error. State is cleared after each finalize so the reporter can serve
    several blocks in sequence.
    """

    def __init__(self, logger: logging.Logger | None = None):
        super().__init__(logger)
        self.failed = False
        self.errored = False
        self.failures: list[str] = []

    def record_check_outcome(self, outcome: CheckOutcome) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"check outcome: {outcome.describe()}")
        if outcome.terminated:
            self.failed = True
            self.failures.append(outcome.describe())

    def record_block_outcome(self, outcome: BlockOutcome) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"block outcome: {outcome.describe()}")
        if outcome.is_error:
            self.errored = True
            self.failures.append(outcome.describe())

    def finalize(self, block_name: str) -> None:
        failed, errored, failures = self.failed, self.errored, self.failures
        self._reset()
        if failed or errored:
            self.logger.info(
                f"block {block_name!r} failed with {len(failures)} failure(s)"
            )
            raise BlockFailure(block_name, failures)
        self.logger.debug(f"block {block_name!r} passed")

    def _reset(self) -> None:
        self.failed = False
        self.errored = False
        self.failures = []

    def reporter_type(self) -> str:
        return "aggregating"
