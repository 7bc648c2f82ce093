"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from aver.config import AverConfig, ReporterType, load_config
from aver.reporters import AggregatingReporter, StrictReporter
from aver.selftest import TestTracker


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "aver.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = AverConfig()
    assert cfg.reporter == ReporterType.AGGREGATING
    assert cfg.debug_log is None
    assert cfg.verbose is False
    assert isinstance(cfg.build_reporter(), AggregatingReporter)


def test_empty_file_is_default_config(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == AverConfig()


def test_load_strict_reporter(tmp_yaml):
    path = tmp_yaml("""\
        reporter: strict
        verbose: true
    """)
    cfg = load_config(path)
    assert cfg.reporter == "strict"
    assert cfg.verbose is True
    assert isinstance(cfg.build_reporter(), StrictReporter)


def test_load_tracker_reporter(tmp_yaml):
    cfg = load_config(tmp_yaml("reporter: tracker\n"))
    assert isinstance(cfg.build_reporter(), TestTracker)


def test_unknown_reporter_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("reporter: lenient\n"))


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("reporters: strict\n"))


def test_relative_debug_log_resolved_against_config_dir(tmp_yaml, tmp_path):
    cfg = load_config(tmp_yaml("debug_log: logs/debug.log\n"))
    assert cfg.debug_log == str((tmp_path / "logs" / "debug.log").resolve())


def test_debug_log_expands_env_vars(tmp_yaml, tmp_path, monkeypatch):
    monkeypatch.setenv("AVER_TEST_LOG_DIR", str(tmp_path / "from-env"))
    cfg = load_config(tmp_yaml("debug_log: ${AVER_TEST_LOG_DIR}/debug.log\n"))
    assert cfg.debug_log == str(tmp_path / "from-env" / "debug.log")


def test_debug_log_env_default(monkeypatch):
    monkeypatch.delenv("AVER_UNSET_DIR", raising=False)
    cfg = AverConfig(debug_log="${AVER_UNSET_DIR:-/tmp/aver}/debug.log")
    assert cfg.debug_log == "/tmp/aver/debug.log"


def test_debug_log_missing_env_var_rejected(monkeypatch):
    monkeypatch.delenv("AVER_UNSET_DIR", raising=False)
    with pytest.raises(ValidationError, match="missing environment variables"):
        AverConfig(debug_log="${AVER_UNSET_DIR}/debug.log")
