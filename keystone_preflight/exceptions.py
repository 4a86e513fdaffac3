"""
Preflight Exceptions

Error types raised outside of probes, with remediation hints for the user.
"""

from pathlib import Path
from typing import Optional, Union


class PreflightError(Exception):
    """Base exception for all preflight errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None,
    ):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class ConfigError(PreflightError):
    """Configuration loading or validation error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.config_key = config_key
        if not remediation and config_key:
            remediation = f"Check the value of '{config_key}' in your config file or environment"
        super().__init__(message, remediation, details)


class ReportWriteError(PreflightError):
    """The JSON report artifact could not be written."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.path = Path(path) if path else None
        if not remediation and self.path:
            remediation = f"Make sure {self.path.parent} exists and is writable"
        super().__init__(message, remediation, details)
