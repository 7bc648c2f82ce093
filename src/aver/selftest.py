"""Reporters for testing aver itself."""

from __future__ import annotations

import logging

from aver.outcome import BlockOutcome, CheckOutcome, TrackerCounts
from aver.reporters.base import Reporter


class TestTracker(Reporter):
    """A reporter that counts what happened and never fails a block.

    Use :meth:`counts` to assert on the recorded outcomes from a test.
    """

    __test__ = False

    def __init__(self, logger: logging.Logger | None = None):
        super().__init__(logger)
        self._failed = 0
        self._succeeded = 0
        self._errored = 0
        self._ran = 0
        self._finalized_blocks: list[str] = []

    def record_check_outcome(self, outcome: CheckOutcome) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"aver result: {outcome.describe()}")
        if outcome.completed:
            self._succeeded += 1
        else:
            self._failed += 1

    def record_block_outcome(self, outcome: BlockOutcome) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"run result: {outcome.describe()}")
        if outcome.is_error:
            self._errored += 1
        else:
            self._ran += 1

    def finalize(self, block_name: str) -> None:
        self._finalized_blocks.append(block_name)

    @property
    def failed(self) -> int:
        return self._failed

    @property
    def succeeded(self) -> int:
        return self._succeeded

    @property
    def errored(self) -> int:
        return self._errored

    @property
    def ran(self) -> int:
        return self._ran

    @property
    def finalized_blocks(self) -> list[str]:
        return list(self._finalized_blocks)

    def counts(self) -> TrackerCounts:
        """Return the number of failed checks, succeeded checks, bodies that
        returned an error and bodies that completed successfully."""
        return TrackerCounts(self._failed, self._succeeded, self._errored, self._ran)

    def reporter_type(self) -> str:
        return "tracker"
