"""
Probe Base Class

A probe is the action a check performs to decide pass or fail.
"""

from abc import ABC, abstractmethod
from typing import Callable

from ..logging_config import get_logger
from .models import CheckOutcome

logger = get_logger(__name__)


class Probe(ABC):
    """
    Abstract base class for probes.

    Subclasses implement run(). Calling the probe runs it and turns any
    unexpected exception into a failed outcome, so a fault never escapes
    to the runner.
    """

    @abstractmethod
    def run(self) -> CheckOutcome:
        """
        Perform the probe.

        Returns:
            CheckOutcome describing pass/fail
        """

    def __call__(self) -> CheckOutcome:
        try:
            return self.run()
        except Exception as e:
            logger.debug("Probe %s raised", type(self).__name__, exc_info=True)
            return CheckOutcome.fail(f"Check error: {e}")


class FunctionProbe(Probe):
    """Wraps a zero-argument callable returning a CheckOutcome."""

    def __init__(self, func: Callable[[], CheckOutcome]):
        self.func = func

    def run(self) -> CheckOutcome:
        return self.func()

    def __repr__(self) -> str:
        return f"FunctionProbe({getattr(self.func, '__name__', self.func)!r})"
