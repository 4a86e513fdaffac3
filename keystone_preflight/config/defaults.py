"""
Default configuration values.

Names of the cloud resources and thresholds the checks validate against.
"""

from typing import Dict, List

DEFAULT_ENVIRONMENT = "dev"

DEFAULT_REQUIRED_APIS: List[str] = [
    "run.googleapis.com",
    "sqladmin.googleapis.com",
    "storage-api.googleapis.com",
]

DEFAULT_STATE_BUCKET_TEMPLATE = "keystone-terraform-state-{environment}"
DEFAULT_BACKUP_BUCKET = "keystone-backups"

DEFAULT_MIN_TERRAFORM_VERSION = "1.5.0"
DEFAULT_TERRAFORM_DIR = "terraform"

DEFAULT_ENV_FILE = ".env"
DEFAULT_ENV_EXAMPLE_FILE = ".env.example"

DEFAULT_COMMAND_TIMEOUT = 5.0
DEFAULT_SLOW_COMMAND_TIMEOUT = 10.0

GCLOUD_INSTALL_URL = "https://cloud.google.com/sdk/docs/install"
TERRAFORM_INSTALL_URL = "https://www.terraform.io/downloads"

TRUE_VALUES = ("1", "true", "yes", "on")

# Environment variables read by ConfigLoader, mapped to config fields
ENV_FIELD_MAP: Dict[str, str] = {
    "APP_ENV": "environment",
    "GCP_PROJECT_ID": "project_id",
    "PREFLIGHT_JSON": "json_output",
    "PREFLIGHT_REPORT_DIR": "report_dir",
}
