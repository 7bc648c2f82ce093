"""Accumulate test assertions into named blocks and report them all at once."""

from aver.block import BlockState, TestBlock, run_block
from aver.errors import AverError, BlockBodyError, BlockFailure, BlockFailures
from aver.isolation import run_isolated
from aver.outcome import BlockOutcome, CheckOutcome, OutcomeKind, TrackerCounts
from aver.reporters import (
    AggregatingReporter,
    Reporter,
    StrictReporter,
    default_reporter,
    get_reporter,
)
from aver.selftest import TestTracker

__all__ = [
    "AggregatingReporter",
    "AverError",
    "BlockBodyError",
    "BlockFailure",
    "BlockFailures",
    "BlockOutcome",
    "BlockState",
    "CheckOutcome",
    "OutcomeKind",
    "Reporter",
    "StrictReporter",
    "TestBlock",
    "TestTracker",
    "TrackerCounts",
    "default_reporter",
    "get_reporter",
    "run_block",
    "run_isolated",
]
