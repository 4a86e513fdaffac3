"""
Google Cloud Project Validation

Checks the project identifier and the APIs the deployment relies on.
"""

from typing import TYPE_CHECKING, List, Set

from ..models import CheckOutcome
from ..probe import Probe
from ..shell import run_command

if TYPE_CHECKING:
    from ...config import PreflightConfig

PROJECT_ID_HINT = "Set GCP_PROJECT_ID in .env or environment"


class ProjectIdProbe(Probe):
    """Pass iff a project identifier is configured."""

    def __init__(self, config: "PreflightConfig"):
        self.project_id = config.project_id

    def run(self) -> CheckOutcome:
        if not self.project_id:
            return CheckOutcome.fail("GCP_PROJECT_ID not set", PROJECT_ID_HINT)
        return CheckOutcome.ok("GCP_PROJECT_ID is set", f"Project: {self.project_id}")


class RequiredApisProbe(Probe):
    """
    Pass iff every required API is enabled in the project.

    A successful listing with no output means no APIs are enabled; a
    failed listing means the state is unknown.
    """

    def __init__(self, config: "PreflightConfig"):
        self.project_id = config.project_id
        self.required_apis = list(config.required_apis)
        self.timeout = config.slow_command_timeout

    def run(self) -> CheckOutcome:
        if not self.project_id:
            return CheckOutcome.fail("Cannot check APIs - project ID not set", PROJECT_ID_HINT)

        result = run_command(
            [
                "gcloud", "services", "list", "--enabled",
                f"--project={self.project_id}", "--format=value(name)",
            ],
            timeout=self.timeout,
        )

        if not result.ok:
            return CheckOutcome.fail(
                "Could not check enabled APIs",
                f"{result.error_text}. Ensure you have permission to list services",
            )

        enabled = {line.strip() for line in result.stdout.splitlines() if line.strip()}
        missing = missing_apis(self.required_apis, enabled)

        if missing:
            if not enabled:
                message = "No APIs are enabled in the project"
            else:
                message = "Required APIs not enabled"
            return CheckOutcome.fail(message, f"Missing: {', '.join(missing)}")

        return CheckOutcome.ok("Required APIs are enabled")


def missing_apis(required: List[str], enabled: Set[str]) -> List[str]:
    """Required APIs absent from the enabled set, in required order.

    `gcloud services list` may print either the bare service name or the
    full resource name (projects/<n>/services/<api>).
    """
    names = {api.rsplit("/", 1)[-1] for api in enabled}
    return [api for api in required if api not in names]
