"""
Pre-flight Check Module

Runs deployment-readiness checks and aggregates them into a report.
"""

from .models import Check, CheckOutcome, CheckStatus, NamedOutcome, Report
from .probe import FunctionProbe, Probe
from .checker import PreflightChecker, run_checks
from .registry import build_checks

__all__ = [
    "PreflightChecker",
    "run_checks",
    "build_checks",
    "Check",
    "CheckOutcome",
    "CheckStatus",
    "NamedOutcome",
    "Report",
    "Probe",
    "FunctionProbe",
]
