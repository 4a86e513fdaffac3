"""
Authentication Validation

Checks that the cloud CLI has an active, authenticated account.
"""

from typing import TYPE_CHECKING

from ..models import CheckOutcome
from ..probe import Probe
from ..shell import run_command

if TYPE_CHECKING:
    from ...config import PreflightConfig


class GcloudAuthProbe(Probe):
    """Pass iff gcloud reports an active account within the timeout."""

    def __init__(self, config: "PreflightConfig"):
        self.timeout = config.command_timeout

    def run(self) -> CheckOutcome:
        result = run_command(
            ["gcloud", "auth", "list", "--filter=status:ACTIVE", "--format=value(account)"],
            timeout=self.timeout,
        )

        accounts = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        if not result.ok or not accounts:
            return CheckOutcome.fail(
                "gcloud not authenticated",
                "Run: gcloud auth login",
            )

        return CheckOutcome.ok(
            "gcloud is authenticated",
            f"Active account: {accounts[0]}",
        )
