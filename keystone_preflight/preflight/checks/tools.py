"""
Tool Presence Validation

Checks that required CLI tools are installed on PATH.
"""

import shutil
from typing import Optional

from ..models import CheckOutcome
from ..probe import Probe


class ToolInstalledProbe(Probe):
    """Pass iff the executable can be found on PATH."""

    def __init__(self, tool: str, display_name: Optional[str] = None, install_url: Optional[str] = None):
        """
        Args:
            tool: Executable name to look up
            display_name: Name used in messages (default: tool)
            install_url: Where to get the tool, shown on failure
        """
        self.tool = tool
        self.display_name = display_name or tool
        self.install_url = install_url

    def run(self) -> CheckOutcome:
        path = shutil.which(self.tool)
        if path is None:
            return CheckOutcome.fail(
                f"{self.display_name} not found",
                f"Install from: {self.install_url}" if self.install_url else None,
            )
        return CheckOutcome.ok(f"{self.display_name} is installed", f"Path: {path}")

    def __repr__(self) -> str:
        return f"ToolInstalledProbe({self.tool!r})"
