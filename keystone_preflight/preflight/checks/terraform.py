"""
Terraform Validation

Checks the installed Terraform version and formatting of the
infrastructure code.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..models import CheckOutcome
from ..probe import Probe
from ..shell import run_command
from ..version import parse_version, version_satisfies

if TYPE_CHECKING:
    from ...config import PreflightConfig


class TerraformVersionProbe(Probe):
    """Pass iff `terraform version -json` reports a version within bounds."""

    def __init__(self, config: "PreflightConfig"):
        self.timeout = config.command_timeout
        self.minimum = config.min_terraform_version
        self.maximum = config.max_terraform_version

    @property
    def requirement(self) -> str:
        text = f">= {self.minimum}"
        if self.maximum:
            text += f", < {self.maximum}"
        return text

    def run(self) -> CheckOutcome:
        result = run_command(["terraform", "version", "-json"], timeout=self.timeout)
        if not result.ok:
            return CheckOutcome.fail("Could not check Terraform version", result.error_text)

        found = _extract_version(result.stdout)
        if found is None:
            return CheckOutcome.fail("Could not parse Terraform version")

        try:
            compatible = version_satisfies(found, self.minimum, self.maximum)
        except ValueError:
            return CheckOutcome.fail(
                "Could not parse Terraform version",
                f"Unrecognized version: {found}",
            )

        if compatible:
            return CheckOutcome.ok("Terraform version is compatible", f"Version: {found}")

        if parse_version(found) < parse_version(self.minimum):
            return CheckOutcome.fail(
                "Terraform version too old",
                f"Found: {found}, Required: {self.requirement}",
            )
        return CheckOutcome.fail(
            "Terraform version too new",
            f"Found: {found}, Required: {self.requirement}",
        )


def _extract_version(output: str) -> Optional[str]:
    """Pull terraform_version out of `terraform version -json` output."""
    try:
        data = json.loads(output)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    version = data.get("terraform_version")
    if not isinstance(version, str) or not version.strip():
        return None
    return version.strip()


class TerraformFormatProbe(Probe):
    """Pass iff `terraform fmt -check -recursive <dir>` exits cleanly."""

    def __init__(self, config: "PreflightConfig"):
        self.timeout = config.slow_command_timeout
        self.directory = config.terraform_dir

    @property
    def fix_command(self) -> str:
        return f"Run: terraform fmt -recursive {self.directory}/"

    def run(self) -> CheckOutcome:
        if not Path(self.directory).is_dir():
            return CheckOutcome.fail(
                f"Terraform directory not found: {self.directory}/",
                "Run preflight from the repository root",
            )

        result = run_command(
            ["terraform", "fmt", "-check", "-recursive", f"{self.directory}/"],
            timeout=self.timeout,
        )

        if result.ok:
            return CheckOutcome.ok("Terraform files are formatted")

        if result.returncode is None:
            # terraform missing or timed out, the files were never checked
            return CheckOutcome.fail("Could not check Terraform formatting", result.error_text)

        files = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        details = self.fix_command
        if files:
            shown = ", ".join(files[:5])
            if len(files) > 5:
                shown += f" and {len(files) - 5} more"
            details += f" (unformatted: {shown})"
        return CheckOutcome.fail("Terraform files not formatted", details)
