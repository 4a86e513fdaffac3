"""
Cloud Storage Validation

Checks that the buckets the deployment depends on exist.
"""

from typing import TYPE_CHECKING

from ..models import CheckOutcome
from ..probe import Probe
from ..shell import run_command
from .gcp import PROJECT_ID_HINT

if TYPE_CHECKING:
    from ...config import PreflightConfig


class BucketExistsProbe(Probe):
    """Pass iff `gsutil ls -b gs://<bucket>` succeeds."""

    def __init__(
        self,
        config: "PreflightConfig",
        bucket: str,
        label: str,
        requires_project: bool = False,
    ):
        """
        Args:
            config: Preflight configuration
            bucket: Bucket name (without gs://)
            label: Human name used in messages, e.g. "Terraform state bucket"
            requires_project: Fail early when no project ID is configured
        """
        self.bucket = bucket
        self.label = label
        self.requires_project = requires_project
        self.project_id = config.project_id
        self.timeout = config.command_timeout

    @property
    def url(self) -> str:
        return f"gs://{self.bucket}"

    def run(self) -> CheckOutcome:
        if self.requires_project and not self.project_id:
            return CheckOutcome.fail(
                f"Cannot check {self.label} - project ID not set",
                PROJECT_ID_HINT,
            )

        result = run_command(["gsutil", "ls", "-b", self.url], timeout=self.timeout)

        if result.ok:
            return CheckOutcome.ok(f"{self.label} exists", f"Bucket: {self.url}")

        if result.returncode is None:
            return CheckOutcome.fail(f"Could not check {self.url}", result.error_text)

        return CheckOutcome.fail(
            f"{self.label} does not exist",
            f"Create with: gsutil mb {self.url}",
        )

    def __repr__(self) -> str:
        return f"BucketExistsProbe({self.bucket!r})"
