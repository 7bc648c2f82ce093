from __future__ import annotations

import logging

from aver.reporters.aggregating import AggregatingReporter
from aver.reporters.base import Reporter
from aver.reporters.strict import StrictReporter
from aver.selftest import TestTracker

_REPORTERS: dict[str, type[Reporter]] = {
    "aggregating": AggregatingReporter,
    "strict": StrictReporter,
    "tracker": TestTracker,
}


def get_reporter(reporter_name: str, logger: logging.Logger | None = None) -> Reporter:
    cls = _REPORTERS.get(reporter_name)
    if cls is None:
        raise ValueError(
            f"Unknown reporter: {reporter_name!r}. "
            f"Available: {', '.join(sorted(_REPORTERS))}"
        )
    return cls(logger=logger)


def default_reporter() -> Reporter:
    """Build the reporter used when a block is created without one."""
    return AggregatingReporter()


__all__ = [
    "AggregatingReporter",
    "Reporter",
    "StrictReporter",
    "TestTracker",
    "default_reporter",
    "get_reporter",
]
