"""
Check Registry

Declares, in a fixed order, every check run before a deployment.
Building the registry performs no I/O.

Each entry specifies:
- name: unique identifier
- description: what the check verifies
- required: failure blocks deployment (otherwise it only warns)
- probe: the action that decides pass/fail
"""

from typing import TYPE_CHECKING, List

from ..config.defaults import GCLOUD_INSTALL_URL, TERRAFORM_INSTALL_URL
from .checks import (
    BucketExistsProbe,
    FileExistsProbe,
    GcloudAuthProbe,
    ProjectIdProbe,
    RequiredApisProbe,
    TerraformFormatProbe,
    TerraformVersionProbe,
    ToolInstalledProbe,
)
from .models import Check

if TYPE_CHECKING:
    from ..config import PreflightConfig


def build_checks(config: "PreflightConfig") -> List[Check]:
    """
    Build the ordered list of deployment checks.

    Args:
        config: Preflight configuration passed to the probes

    Returns:
        Checks in the order they run and are reported
    """
    return [
        Check(
            name="gcloud-installed",
            description="gcloud CLI is installed",
            required=True,
            probe=ToolInstalledProbe("gcloud", "gcloud CLI", GCLOUD_INSTALL_URL),
        ),
        Check(
            name="gcloud-authenticated",
            description="gcloud is authenticated",
            required=True,
            probe=GcloudAuthProbe(config),
        ),
        Check(
            name="terraform-installed",
            description="Terraform is installed",
            required=True,
            probe=ToolInstalledProbe("terraform", "Terraform", TERRAFORM_INSTALL_URL),
        ),
        Check(
            name="terraform-version",
            description=f"Terraform version >= {config.min_terraform_version}",
            required=True,
            probe=TerraformVersionProbe(config),
        ),
        Check(
            name="project-id-set",
            description="GCP_PROJECT_ID is set",
            required=True,
            probe=ProjectIdProbe(config),
        ),
        Check(
            name="required-apis",
            description="Required GCP APIs are enabled",
            required=True,
            probe=RequiredApisProbe(config),
        ),
        Check(
            name="state-bucket-exists",
            description="Terraform state bucket exists",
            required=True,
            probe=BucketExistsProbe(
                config,
                config.state_bucket,
                "Terraform state bucket",
                requires_project=True,
            ),
        ),
        Check(
            name="backup-bucket-exists",
            description="Backup bucket exists",
            required=False,
            probe=BucketExistsProbe(config, config.backup_bucket, "Backup bucket"),
        ),
        Check(
            name="env-file-exists",
            description=f"{config.env_file} file is configured",
            required=False,
            probe=FileExistsProbe(config.env_file, config.env_example_file),
        ),
        Check(
            name="terraform-formatted",
            description="Terraform files are formatted",
            required=False,
            probe=TerraformFormatProbe(config),
        ),
    ]

