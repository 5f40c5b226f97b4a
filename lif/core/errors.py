"""Outcome classification for engine operations.

Engine operations never raise across their boundary. Every transition or
dashboard action reports what happened through an ``Outcome`` value, which
the HTTP layer forwards to the user as-is.
"""

from enum import Enum

from pydantic import BaseModel


class OutcomeCode(Enum):
    """Codes describing the result of an engine operation."""

    OK = "ok"
    SPEC_UNPARSEABLE = "spec_unparseable"
    ALREADY_ACTIVE = "already_active"
    ALREADY_EXPIRED = "already_expired"
    NOT_ACTIVE = "not_active"
    NOT_FOUND = "not_found"
    UNKNOWN_ACTION = "unknown_action"


class OutcomeSeverity(Enum):
    """Severity levels for outcomes."""

    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"


class Outcome(BaseModel):
    """Structured result of an engine operation with user-facing messaging."""

    code: OutcomeCode
    message: str
    severity: OutcomeSeverity = OutcomeSeverity.INFO

    @property
    def ok(self) -> bool:
        return self.code is OutcomeCode.OK

    @classmethod
    def success(cls, message: str) -> "Outcome":
        return cls(code=OutcomeCode.OK, message=message)

    @classmethod
    def noop(cls, code: OutcomeCode, message: str) -> "Outcome":
        """A rejected request that left state untouched."""
        return cls(code=code, message=message, severity=OutcomeSeverity.LOW)

    @classmethod
    def failure(cls, code: OutcomeCode, message: str) -> "Outcome":
        """A request that could not be completed and needs the user to correct something."""
        return cls(code=code, message=message, severity=OutcomeSeverity.MEDIUM)


class StoreError(Exception):
    """Raised when dashboard data cannot be read from or written to disk."""
