"""
Pre-flight Checker

Runs the registered checks and aggregates their outcomes into a report.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..logging_config import get_logger
from .models import Check, CheckStatus, NamedOutcome, Report
from .registry import build_checks

if TYPE_CHECKING:
    from ..config import PreflightConfig

logger = get_logger(__name__)


def run_checks(
    checks: Sequence[Check],
    environment: str = "dev",
    now: Optional[datetime] = None,
) -> Report:
    """
    Run every check once, in order, and build the report.

    All checks run even after a required failure so the full report is
    available in one pass.

    Args:
        checks: Checks in registration order
        environment: Environment label recorded in the report
        now: Report timestamp (default: current UTC time)

    Returns:
        Report with counts and the deploy verdict
    """
    timestamp = now or datetime.now(timezone.utc)
    outcomes: List[NamedOutcome] = []
    passed = failed = warnings = 0

    for check in checks:
        result = check.probe()
        outcome = NamedOutcome(name=check.name, required=check.required, result=result)
        outcomes.append(outcome)

        status = outcome.status
        if status == CheckStatus.PASS:
            passed += 1
        elif status == CheckStatus.FAIL:
            failed += 1
        else:
            warnings += 1

        logger.debug("%s: %s - %s", check.name, status.value, result.message)

    return Report(
        timestamp=timestamp,
        environment=environment,
        total_checks=len(outcomes),
        passed=passed,
        failed=failed,
        warnings=warnings,
        checks=tuple(outcomes),
    )


class PreflightChecker:
    """
    Orchestrates the deployment-readiness checks.

    Validates:
    - gcloud and Terraform are installed and usable
    - gcloud is authenticated
    - The GCP project, its APIs and buckets are in place
    - Local configuration and formatting are in order
    """

    def __init__(
        self,
        config: "PreflightConfig",
        checks: Optional[Sequence[Check]] = None,
    ):
        """
        Initialize the checker.

        Args:
            config: Preflight configuration
            checks: Checks to run (default: the full registry)
        """
        self.config = config
        self.checks = list(checks) if checks is not None else build_checks(config)

    def run_all(self, now: Optional[datetime] = None) -> Report:
        """
        Run all checks.

        Returns:
            Report for the configured environment
        """
        logger.info(
            "Running %d preflight checks for environment '%s'",
            len(self.checks),
            self.config.environment,
        )
        return run_checks(self.checks, environment=self.config.environment, now=now)
