"""Test doubles for external commands and probes."""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from keystone_preflight.preflight import Check, CheckOutcome, FunctionProbe
from keystone_preflight.preflight.shell import CommandResult


def command_ok(stdout: str = "") -> CommandResult:
    return CommandResult(args=(), returncode=0, stdout=stdout)


def command_failed(returncode: int = 1, stderr: str = "", stdout: str = "") -> CommandResult:
    return CommandResult(args=(), returncode=returncode, stdout=stdout, stderr=stderr)


def command_timed_out() -> CommandResult:
    return CommandResult(args=(), timed_out=True)


def command_not_found(tool: str) -> CommandResult:
    return CommandResult(args=(), error=f"Command not found: {tool}")


class FakeCommands:
    """Stands in for run_command; responses are keyed by argument prefix."""

    def __init__(self):
        self.responses: Dict[Tuple[str, ...], CommandResult] = {}
        self.calls: List[Tuple[Tuple[str, ...], float]] = []

    def set(self, prefix: Sequence[str], result: CommandResult) -> None:
        self.responses[tuple(prefix)] = result

    def __call__(self, args: Sequence[str], timeout: float = 5.0) -> CommandResult:
        args = tuple(args)
        self.calls.append((args, timeout))
        matches = [p for p in self.responses if args[: len(p)] == p]
        if not matches:
            return command_not_found(args[0])
        return self.responses[max(matches, key=len)]

    def ran(self, *prefix: str) -> bool:
        return any(args[: len(prefix)] == prefix for args, _ in self.calls)


def make_check(name: str, passed: bool, required: bool = True, details=None) -> Check:
    """Build a check whose probe returns a fixed outcome."""
    outcome = CheckOutcome(passed=passed, message=f"{name} {'ok' if passed else 'failed'}", details=details)
    return Check(
        name=name,
        description=f"{name} description",
        required=required,
        probe=FunctionProbe(lambda: outcome),
    )


def check_names(checks: Iterable[Check]) -> List[str]:
    return [c.name for c in checks]


def find_check(checks: Iterable[Check], name: str) -> Optional[Check]:
    return next((c for c in checks if c.name == name), None)
