"""Data structures for check and block outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


class OutcomeKind(str, Enum):
    VOID = "void"
    OK = "ok"
    ERR = "err"


@dataclass(frozen=True)
class CheckOutcome:
    """Result of evaluating a single isolated check.

    Attributes:
        completed: True if the operation returned, False if it terminated
            abnormally (an assertion failure or an explicit fail signal).
        value: Whatever the operation returned, when it completed.
        error: The captured exception, when it terminated abnormally.
        label: Optional human-readable name of the check (e.g. "aver_eq").
    """

    completed: bool
    value: Any = None
    error: BaseException | None = None
    label: str | None = None

    @classmethod
    def normal(cls, value: Any = None, label: str | None = None) -> CheckOutcome:
        return cls(completed=True, value=value, label=label)

    @classmethod
    def abnormal(cls, error: BaseException, label: str | None = None) -> CheckOutcome:
        return cls(completed=False, error=error, label=label)

    @property
    def terminated(self) -> bool:
        return not self.completed

    def describe(self) -> str:
        prefix = f"{self.label}: " if self.label else ""
        if self.completed:
            return f"{prefix}passed"
        return f"{prefix}{_describe_error(self.error)}"


@dataclass(frozen=True)
class BlockOutcome:
    """Terminal result of a block's deferred body.

    The payload is opaque: reporters only ever display it.
    """

    kind: OutcomeKind
    payload: Any = None

    @classmethod
    def void(cls) -> BlockOutcome:
        return cls(OutcomeKind.VOID)

    @classmethod
    def ok(cls, value: Any) -> BlockOutcome:
        return cls(OutcomeKind.OK, value)

    @classmethod
    def err(cls, error: Any) -> BlockOutcome:
        return cls(OutcomeKind.ERR, error)

    @classmethod
    def from_return(cls, value: Any) -> BlockOutcome:
        """Normalise whatever a block body returned into a BlockOutcome."""
        if value is None:
            return cls.void()
        if isinstance(value, BlockOutcome):
            return value
        if isinstance(value, BaseException):
            return cls.err(value)
        return cls.ok(value)

    @property
    def is_error(self) -> bool:
        return self.kind == OutcomeKind.ERR

    @property
    def is_success(self) -> bool:
        return not self.is_error

    def describe(self) -> str:
        if self.kind == OutcomeKind.VOID:
            return "body completed"
        if self.kind == OutcomeKind.OK:
            return f"body returned {_safe_repr(self.payload)}"
        if isinstance(self.payload, BaseException):
            return f"body returned error: {_describe_error(self.payload)}"
        return f"body returned error: {_safe_str(self.payload)}"


class TrackerCounts(NamedTuple):
    """Counters reported by the self-test tracker.

    Compares equal to a plain ``(failed, succeeded, errored, ran)`` tuple.
    """

    failed: int
    succeeded: int
    errored: int
    ran: int


def _describe_error(error: BaseException | None) -> str:
    if error is None:
        return "terminated abnormally"
    message = _safe_str(error).strip()
    name = type(error).__name__
    if not message:
        return name
    first_line = message.splitlines()[0]
    return f"{name}: {first_line}"


def _safe_str(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:
        return f"<unprintable {type(obj).__name__}>"


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception:
        return f"<unprintable {type(obj).__name__}>"
