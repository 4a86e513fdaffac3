"""
Pre-flight Check Models

Shared data types for deployment-readiness checks.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .probe import Probe


class CheckStatus(str, Enum):
    """Classified outcome of a check within a report."""
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


@dataclass(frozen=True)
class CheckOutcome:
    """Result produced by a single probe invocation."""
    passed: bool
    message: str
    details: Optional[str] = None

    @classmethod
    def ok(cls, message: str, details: Optional[str] = None) -> "CheckOutcome":
        return cls(passed=True, message=message, details=details)

    @classmethod
    def fail(cls, message: str, details: Optional[str] = None) -> "CheckOutcome":
        return cls(passed=False, message=message, details=details)

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.message}"


@dataclass(frozen=True)
class Check:
    """
    A statically registered validation unit.

    Required checks block deployment when they fail; optional checks
    only produce a warning.
    """
    name: str
    description: str
    required: bool
    probe: "Probe" = field(repr=False, compare=False)


@dataclass(frozen=True)
class NamedOutcome:
    """A check's outcome paired with the check's name and requirement flag."""
    name: str
    required: bool
    result: CheckOutcome

    @property
    def status(self) -> CheckStatus:
        if self.result.passed:
            return CheckStatus.PASS
        if self.required:
            return CheckStatus.FAIL
        return CheckStatus.WARN


@dataclass(frozen=True)
class Report:
    """Aggregated result of one full run of all checks."""
    timestamp: datetime
    environment: str
    total_checks: int
    passed: int
    failed: int
    warnings: int
    checks: Tuple[NamedOutcome, ...] = ()

    @property
    def can_deploy(self) -> bool:
        """Deployment may proceed only when no required check failed."""
        return self.failed == 0

    @property
    def failures(self) -> Tuple[NamedOutcome, ...]:
        """Required checks that did not pass."""
        return tuple(c for c in self.checks if c.status == CheckStatus.FAIL)

    @property
    def warning_checks(self) -> Tuple[NamedOutcome, ...]:
        """Optional checks that did not pass."""
        return tuple(c for c in self.checks if c.status == CheckStatus.WARN)

    def summary(self) -> str:
        """Get summary string."""
        return (
            f"Total: {self.total_checks} | Passed: {self.passed} | "
            f"Failed: {self.failed} | Warnings: {self.warnings}"
        )
