"""Exceptions raised by aver."""

from __future__ import annotations

from aver.outcome import _safe_str


class AverError(Exception):
    """Misuse of the aver API (not a test failure)."""


class BlockFailure(AssertionError):
    """Aggregated failure raised when a test block is finalized.

    Subclasses AssertionError so test runners report it like any other
    failed assertion.
    """

    def __init__(self, block_name: str, failures: list[str] | None = None):
        self.block_name = block_name
        self.failures = list(failures or [])
        message = f"Test cases in block {block_name!r} failed"
        if self.failures:
            details = "\n".join(
                f"  {i}: {failure}" for i, failure in enumerate(self.failures, start=1)
            )
            message = f"{message} ({len(self.failures)} failure(s)):\n{details}"
        super().__init__(message)


class BlockBodyError(AssertionError):
    """Raised immediately by fail-fast reporters when a block body returns an error."""

    def __init__(self, payload: object):
        self.payload = payload
        super().__init__(f"Unexpected error result: {_safe_str(payload)}")


class BlockFailures(AssertionError):
    """Several blocks failed when they were finalized together."""

    def __init__(self, failures: list[AssertionError]):
        self.failures = list(failures)
        details = "\n".join(_safe_str(failure) for failure in self.failures)
        super().__init__(f"{len(self.failures)} test blocks failed:\n{details}")
