from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

from aver.reporters import Reporter, get_reporter


class ReporterType(str, Enum):
    AGGREGATING = "aggregating"
    STRICT = "strict"
    TRACKER = "tracker"


class AverConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    reporter: ReporterType = ReporterType.AGGREGATING
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("debug_log")
    @classmethod
    def expand_debug_log(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, rejecting variables without a default.

        Raises ValueError naming the offending value so it can be fixed
        before any block runs.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception:
            # Variable is missing and has no default
            raise ValueError(
                f"debug_log has missing environment variables: {v}"
            ) from None

    def build_reporter(self, logger: logging.Logger | None = None) -> Reporter:
        return get_reporter(self.reporter.value, logger=logger)


def load_config(path: Path) -> AverConfig:
    """Load and validate an aver config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = AverConfig(**(raw or {}))

    # Resolve relative debug_log paths relative to config file location
    if config.debug_log is not None:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config
