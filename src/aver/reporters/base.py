from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from aver.errors import AverError
from aver.outcome import BlockOutcome, CheckOutcome


class Reporter(ABC):
    """Collects outcomes for a test block and decides whether it failed.

    A reporter is owned by the caller and borrowed by one block at a time.
    Only ``finalize`` (and, for fail-fast policies, ``record_block_outcome``)
    may raise.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("aver")
        self._borrowed_by: str | None = None

    @abstractmethod
    def record_check_outcome(self, outcome: CheckOutcome) -> None:
        """Invoked once per isolated check evaluated through a block."""
        ...

    @abstractmethod
    def record_block_outcome(self, outcome: BlockOutcome) -> None:
        """Invoked at most once per block, with its body's terminal result."""
        ...

    @abstractmethod
    def finalize(self, block_name: str) -> None:
        """Invoked exactly once when a block is torn down.

        Raises:
            BlockFailure: if the policy considers the block failed.
        """
        ...

    def borrow(self, block_name: str) -> None:
        """Bind this reporter to an open block.

        Raises:
            AverError: if another block still holds the reporter.
        """
        if self._borrowed_by is not None:
            raise AverError(
                f"Reporter is already in use by open block {self._borrowed_by!r}; "
                f"finalize it before creating block {block_name!r}"
            )
        self._borrowed_by = block_name

    def release(self) -> None:
        self._borrowed_by = None

    @property
    def borrowed_by(self) -> str | None:
        return self._borrowed_by

    def reporter_type(self) -> str:
        """Identifier for this reporter type."""
        return type(self).__name__
