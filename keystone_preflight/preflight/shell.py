"""
External Command Execution

Runs CLI tools with a bounded wait. Failures are reported through the
returned CommandResult instead of exceptions.
"""

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running an external command."""
    args: Sequence[str]
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Command ran to completion with exit status 0."""
        return self.returncode == 0 and not self.timed_out and self.error is None

    @property
    def error_text(self) -> str:
        """Best available description of why the command did not succeed."""
        if self.error:
            return self.error
        if self.timed_out:
            return "Command timed out"
        stderr = self.stderr.strip()
        if stderr:
            return stderr.splitlines()[-1]
        return f"Command exited with status {self.returncode}"


def run_command(args: Sequence[str], timeout: float = 5.0) -> CommandResult:
    """
    Run an external command and capture its output.

    subprocess.run kills and reaps the child when the timeout expires.

    Args:
        args: Command and arguments
        timeout: Seconds to wait before giving up

    Returns:
        CommandResult (never raises for execution failures)
    """
    logger.debug("Running: %s (timeout %ss)", " ".join(args), timeout)

    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Timed out after %ss: %s", timeout, args[0])
        return CommandResult(args=tuple(args), timed_out=True)
    except FileNotFoundError:
        return CommandResult(args=tuple(args), error=f"Command not found: {args[0]}")
    except OSError as e:
        return CommandResult(args=tuple(args), error=f"Could not run {args[0]}: {e}")

    logger.debug("%s exited with status %s", args[0], result.returncode)
    return CommandResult(
        args=tuple(args),
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
