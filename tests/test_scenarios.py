"""Table-driven scenarios run against both the fatal and the counting reporter."""

import pytest

from aver.block import TestBlock, run_block
from aver.errors import BlockFailure
from aver.outcome import BlockOutcome
from aver.reporters import AggregatingReporter
from aver.selftest import TestTracker


def _two_failing(tb):
    tb.aver(1 > 2)
    tb.aver("" == "x")


def _pass_fail_pass(tb):
    tb.aver(True)
    tb.aver(False)
    tb.aver(True)


def _body_error(tb):
    return BlockOutcome.err("database unavailable")


def _body_success(tb):
    return BlockOutcome.ok(7)


SCENARIOS = [
    # name, body, expected tracker counts, default reporter raises
    ("B1", _two_failing, (2, 0, 0, 1), True),
    ("B2", _pass_fail_pass, (1, 2, 0, 1), True),
    ("B3", _body_error, (0, 0, 1, 0), True),
    ("B4", _body_success, (0, 0, 0, 1), False),
]


@pytest.mark.parametrize("name,body,counts,_raises", SCENARIOS)
def test_tracker_counts(name, body, counts, _raises):
    tracker = TestTracker()
    run_block(name, body, tracker)
    assert tracker.counts() == counts
    assert tracker.finalized_blocks == [name]


@pytest.mark.parametrize("name,body,_counts,raises", SCENARIOS)
def test_default_reporter_verdict(name, body, _counts, raises):
    if raises:
        with pytest.raises(BlockFailure) as exc_info:
            run_block(name, body, AggregatingReporter())
        assert exc_info.value.block_name == name
        assert name in str(exc_info.value)
    else:
        run_block(name, body, AggregatingReporter())


def test_b1_failure_lists_both_checks():
    with pytest.raises(BlockFailure) as exc_info:
        run_block("B1", _two_failing)
    assert len(exc_info.value.failures) == 2


@pytest.mark.parametrize("outcomes", [[], [True], [False], [True, False, False, True]])
def test_counts_match_observed_outcomes(outcomes):
    tracker = TestTracker()
    with TestBlock("property", tracker) as tb:
        for ok in outcomes:
            tb.aver(ok)

    assert tracker.failed == outcomes.count(False)
    assert tracker.succeeded == outcomes.count(True)
    assert tracker.finalized_blocks == ["property"]


@pytest.mark.parametrize("checks", [0, 1, 10])
def test_default_reporter_passes_when_no_check_fails(checks):
    reporter = AggregatingReporter()
    with TestBlock("all good", reporter) as tb:
        for i in range(checks):
            tb.aver_eq(i, i)


def test_counts_independent_of_completion_order():
    before = TestTracker()
    with TestBlock("complete first", before) as tb:
        tb.ran()
        tb.aver(False)
        tb.aver(True)

    after = TestTracker()
    with TestBlock("complete last", after) as tb:
        tb.aver(False)
        tb.aver(True)
        tb.ran()

    assert before.counts() == after.counts() == (1, 1, 0, 1)
