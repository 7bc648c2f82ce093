"""Run a single check without letting its failure abort the caller."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from aver.outcome import CheckOutcome

# pytest.fail() raises an outcome exception that derives from BaseException,
# so it has to be listed next to Exception. KeyboardInterrupt, SystemExit,
# GeneratorExit and pytest.skip() are not recoverable.
RECOVERABLE_TERMINATIONS: tuple[type[BaseException], ...] = (
    Exception,
    pytest.fail.Exception,
)


def run_isolated(
    operation: Callable[[], Any], *, label: str | None = None
) -> CheckOutcome:
    """Execute *operation* and capture how it terminated.

    Returns a completed outcome carrying the return value, or a terminated
    outcome carrying the captured exception. Terminations outside
    RECOVERABLE_TERMINATIONS propagate unchanged.
    """
    try:
        value = operation()
    except RECOVERABLE_TERMINATIONS as exc:
        return CheckOutcome.abnormal(exc, label=label)
    return CheckOutcome.normal(value, label=label)
