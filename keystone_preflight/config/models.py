"""
Pydantic model for preflight configuration.

Values are read once at startup and passed explicitly to every probe
that needs them.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..preflight.version import parse_version
from .defaults import (
    DEFAULT_BACKUP_BUCKET,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_ENV_EXAMPLE_FILE,
    DEFAULT_ENV_FILE,
    DEFAULT_ENVIRONMENT,
    DEFAULT_MIN_TERRAFORM_VERSION,
    DEFAULT_REQUIRED_APIS,
    DEFAULT_SLOW_COMMAND_TIMEOUT,
    DEFAULT_STATE_BUCKET_TEMPLATE,
    DEFAULT_TERRAFORM_DIR,
    TRUE_VALUES,
)


class PreflightConfig(BaseModel):
    """Immutable configuration for one preflight run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    environment: str = Field(default=DEFAULT_ENVIRONMENT, description="Environment label (dev, staging, prod)")
    project_id: str = Field(default="", description="GCP project identifier")
    json_output: bool = Field(default=False, description="Write a JSON report file")
    report_dir: str = Field(default=".", description="Directory for the JSON report")

    command_timeout: float = Field(default=DEFAULT_COMMAND_TIMEOUT, gt=0, description="Timeout for quick commands (seconds)")
    slow_command_timeout: float = Field(
        default=DEFAULT_SLOW_COMMAND_TIMEOUT, gt=0, description="Timeout for listing/format commands (seconds)"
    )

    required_apis: List[str] = Field(default_factory=lambda: list(DEFAULT_REQUIRED_APIS))
    state_bucket_template: str = Field(default=DEFAULT_STATE_BUCKET_TEMPLATE)
    backup_bucket: str = Field(default=DEFAULT_BACKUP_BUCKET)

    min_terraform_version: str = Field(default=DEFAULT_MIN_TERRAFORM_VERSION)
    max_terraform_version: Optional[str] = Field(None, description="Exclusive upper bound")
    terraform_dir: str = Field(default=DEFAULT_TERRAFORM_DIR)

    env_file: str = Field(default=DEFAULT_ENV_FILE)
    env_example_file: str = Field(default=DEFAULT_ENV_EXAMPLE_FILE)

    @field_validator("environment", mode="before")
    @classmethod
    def default_empty_environment(cls, v):
        """An empty environment label falls back to the default."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ENVIRONMENT
        return v.strip() if isinstance(v, str) else v

    @field_validator("project_id", mode="before")
    @classmethod
    def strip_project_id(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("json_output", mode="before")
    @classmethod
    def parse_toggle(cls, v):
        """Accept 'true'/'1'/'yes'/'on' from environment strings."""
        if isinstance(v, str):
            return v.strip().lower() in TRUE_VALUES
        return v

    @field_validator("min_terraform_version", "max_terraform_version")
    @classmethod
    def validate_version(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            parse_version(v)
        return v

    @field_validator("state_bucket_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        try:
            v.format(environment="x")
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid bucket template '{v}': only {{environment}} is supported ({e})")
        return v

    @model_validator(mode="after")
    def validate_version_range(self):
        """Ensure the minimum terraform version is below the maximum."""
        if self.max_terraform_version is not None:
            if parse_version(self.min_terraform_version) >= parse_version(self.max_terraform_version):
                raise ValueError(
                    f"min_terraform_version {self.min_terraform_version} must be lower than "
                    f"max_terraform_version {self.max_terraform_version}"
                )
        return self

    @property
    def state_bucket(self) -> str:
        """Terraform state bucket name for this environment."""
        return self.state_bucket_template.format(environment=self.environment)
