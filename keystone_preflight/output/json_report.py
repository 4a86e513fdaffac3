"""
JSON Report Artifact

Serializes a Report to a timestamped JSON file for pipeline consumption.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..exceptions import ReportWriteError
from ..logging_config import get_logger
from ..preflight.models import Report

logger = get_logger(__name__)

FILENAME_PREFIX = "preflight-report-"


def report_to_dict(report: Report) -> Dict[str, Any]:
    """
    Convert a report to the published JSON schema.

    Returns:
        Dict with Timestamp, Environment, TotalChecks, Passed, Failed,
        Warnings, Checks and CanDeploy
    """
    return {
        "Timestamp": report.timestamp.isoformat(),
        "Environment": report.environment,
        "TotalChecks": report.total_checks,
        "Passed": report.passed,
        "Failed": report.failed,
        "Warnings": report.warnings,
        "Checks": [
            {
                "Name": check.name,
                "Required": check.required,
                "Result": {
                    "Passed": check.result.passed,
                    "Message": check.result.message,
                    "Details": check.result.details or "",
                },
            }
            for check in report.checks
        ],
        "CanDeploy": report.can_deploy,
    }


def report_filename(now: Optional[datetime] = None) -> str:
    """Get the report file name for a run time, e.g. preflight-report-20240131-154500.json."""
    now = now or datetime.now()
    return f"{FILENAME_PREFIX}{now.strftime('%Y%m%d-%H%M%S')}.json"


def write_json_report(
    report: Report,
    directory: Union[str, Path] = ".",
    now: Optional[datetime] = None,
) -> Path:
    """
    Write the report as JSON.

    Args:
        report: Report to serialize
        directory: Target directory (must exist)
        now: Time used in the file name (default: current local time)

    Returns:
        Path of the written file

    Raises:
        ReportWriteError: If the file cannot be written
    """
    path = Path(directory) / report_filename(now)

    try:
        data = json.dumps(report_to_dict(report), indent=2)
    except (TypeError, ValueError) as e:
        raise ReportWriteError("Error generating JSON report", details=str(e))

    try:
        with open(path, "w") as f:
            f.write(data)
            f.write("\n")
    except OSError as e:
        raise ReportWriteError(f"Error writing JSON report to {path}", path=path, details=str(e))

    logger.debug("Wrote JSON report to %s", path)
    return path
