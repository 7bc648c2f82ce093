"""pytest fixtures for aver test blocks.

Registered through the ``pytest11`` entry point, so installing aver makes
the ``aver_block`` and ``aver_reporter`` fixtures available everywhere::

    def test_addition(aver_block):
        with aver_block("addition table") as tb:
            for a, b, expected in [(1, 1, 2), (2, 2, 4)]:
                tb.aver_eq(a + b, expected)
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from aver.block import TestBlock
from aver.config import AverConfig, load_config
from aver.errors import BlockFailures
from aver.reporters import Reporter
from aver.verbose import setup_logger


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("aver")
    group.addoption(
        "--aver-config",
        action="store",
        default=None,
        help="Path to an aver YAML config selecting the block reporter",
    )


@pytest.fixture(scope="session")
def aver_config(pytestconfig: pytest.Config) -> AverConfig:
    path = pytestconfig.getoption("aver_config")
    if path is None:
        return AverConfig()
    return load_config(Path(path))


@pytest.fixture(scope="session")
def aver_logger(aver_config: AverConfig, pytestconfig: pytest.Config):
    if aver_config.debug_log is None:
        yield logging.getLogger("aver")
        return

    logger = setup_logger(
        Path(aver_config.debug_log),
        verbose=aver_config.verbose,
        logger_name=f"aver_session_{id(pytestconfig)}",
    )
    yield logger

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def aver_reporter(aver_config: AverConfig, aver_logger: logging.Logger) -> Reporter:
    """A fresh reporter for the current test, as selected by the config."""
    return aver_config.build_reporter(logger=aver_logger)


@pytest.fixture
def aver_block(aver_config: AverConfig, aver_logger: logging.Logger):
    """Factory building test blocks, each with its own configured reporter.

    Pass ``reporter=`` to bind a block to a specific reporter instead (for
    example ``aver_reporter``); a reporter serves one open block at a time.
    Blocks the test never closed are finalized at teardown, so a block
    created without ``with`` still fails the test if its checks failed.
    """
    blocks: list[TestBlock] = []

    def _make(name: str, reporter: Reporter | None = None) -> TestBlock:
        if reporter is None:
            reporter = aver_config.build_reporter(logger=aver_logger)
        block = TestBlock(name, reporter)
        blocks.append(block)
        return block

    yield _make

    failures: list[AssertionError] = []
    for block in blocks:
        try:
            block.finalize()
        except AssertionError as e:
            failures.append(e)
    if len(failures) == 1:
        raise failures[0]
    if failures:
        raise BlockFailures(failures)
