"""Test blocks: scoped accumulators of isolated check outcomes.

A ``TestBlock`` groups several checks under one name. Checks evaluated
through the block never abort the surrounding test; instead their outcomes
are handed to the block's reporter, which decides at teardown whether the
block as a whole failed::

    with TestBlock("addition table") as tb:
        for a, b, expected in cases:
            tb.aver_eq(a + b, expected)

Teardown only happens when the block's scope ends, so a block must be used
as a context manager, through :func:`run_block`, or through the
``aver_block`` pytest fixture. Each of these guarantees that the reporter's
``finalize`` runs exactly once, whether the scope is left normally or by an
exception.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from aver.errors import AverError
from aver.isolation import run_isolated
from aver.outcome import BlockOutcome, CheckOutcome
from aver.reporters import Reporter, default_reporter


class BlockState(str, Enum):
    CREATED = "created"
    FINALIZING = "finalizing"
    FINALIZED = "finalized"


class TestBlock:
    """A named unit of checks whose failures are reported all at once."""

    __test__ = False

    def __init__(self, name: str, reporter: Reporter | None = None):
        self.name = name
        self.reporter = reporter if reporter is not None else default_reporter()
        self.reporter.borrow(name)
        self.state = BlockState.CREATED
        self.checks_run = 0
        self._body_outcome: BlockOutcome | None = None

    def __repr__(self) -> str:
        return f"TestBlock({self.name!r}, state={self.state.value})"

    def __enter__(self) -> TestBlock:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.finalize()
        return False

    @property
    def body_outcome(self) -> BlockOutcome | None:
        return self._body_outcome

    def evaluate_isolated(
        self, operation: Callable[[], Any], *, label: str | None = None
    ) -> CheckOutcome:
        """Run *operation*, catching any assertion failure it raises.

        The outcome is passed to the reporter's ``record_check_outcome``;
        execution of the caller continues either way.
        """
        self._require_open("evaluate a check")
        outcome = run_isolated(operation, label=label)
        self.checks_run += 1
        self.reporter.record_check_outcome(outcome)
        return outcome

    def complete_with_body_result(self, result: Any = None) -> BlockOutcome:
        """Report the terminal result of the block's body.

        ``None`` means the body returned nothing, an exception instance or an
        ``Err`` outcome means it failed, anything else is a success value.
        """
        self._require_open("complete the block")
        if self._body_outcome is not None:
            raise AverError(f"Block {self.name!r} was already completed")
        outcome = BlockOutcome.from_return(result)
        self._body_outcome = outcome
        self.reporter.record_block_outcome(outcome)
        return outcome

    ran = complete_with_body_result

    def finalize(self) -> None:
        """Ask the reporter for the verdict. Runs at most once per block."""
        if self.state is not BlockState.CREATED:
            return
        self.state = BlockState.FINALIZING
        try:
            self.reporter.finalize(self.name)
        finally:
            self.state = BlockState.FINALIZED
            self.reporter.release()

    @property
    def finalized(self) -> bool:
        return self.state is not BlockState.CREATED

    def aver(self, condition: Any, message: str | None = None) -> CheckOutcome:
        """Check that *condition* is truthy without aborting the block.

        *condition* may be a zero-argument callable, in which case it is
        called inside the isolated region and its result is checked. Any
        callable is called, including classes and mocks; to check the
        truthiness of a callable object itself, pass ``bool(obj)``.
        """

        def check() -> None:
            value = condition() if callable(condition) else condition
            if not value:
                raise AssertionError(f"assert {value!r}")

        return self.evaluate_isolated(check, label=message or "aver")

    def aver_eq(self, left: Any, right: Any, message: str | None = None) -> CheckOutcome:
        """Check that ``left == right`` without aborting the block."""

        def check() -> None:
            if not left == right:
                raise AssertionError(f"assert {left!r} == {right!r}")

        return self.evaluate_isolated(check, label=message or "aver_eq")

    def aver_ne(self, left: Any, right: Any, message: str | None = None) -> CheckOutcome:
        """Check that ``left != right`` without aborting the block."""

        def check() -> None:
            if not left != right:
                raise AssertionError(f"assert {left!r} != {right!r}")

        return self.evaluate_isolated(check, label=message or "aver_ne")

    def _require_open(self, action: str) -> None:
        if self.state is not BlockState.CREATED:
            raise AverError(f"Cannot {action}: block {self.name!r} is {self.state.value}")


def run_block(
    name: str,
    body: Callable[[TestBlock], Any],
    reporter: Reporter | None = None,
) -> BlockOutcome:
    """Construct a block, run *body* against it and finalize it.

    The body's return value is reported through
    :meth:`TestBlock.complete_with_body_result`. Exceptions raised by the
    body propagate after the block has been finalized.
    """
    with TestBlock(name, reporter) as block:
        result = body(block)
        return block.complete_with_body_result(result)

