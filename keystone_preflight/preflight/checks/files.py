"""
Local File Validation

Checks that configuration files are present in the working directory.
"""

from pathlib import Path
from typing import Optional, Union

from ..models import CheckOutcome
from ..probe import Probe


class FileExistsProbe(Probe):
    """Pass iff the file exists."""

    def __init__(self, path: Union[str, Path], example: Optional[Union[str, Path]] = None):
        """
        Args:
            path: File that must exist
            example: Template file the user can copy from, shown on failure
        """
        self.path = Path(path)
        self.example = Path(example) if example else None

    def run(self) -> CheckOutcome:
        if not self.path.is_file():
            if self.example is not None:
                details = f"Copy from {self.example} and configure"
            else:
                details = f"Create {self.path}"
            return CheckOutcome.fail(f"{self.path} file not found", details)
        return CheckOutcome.ok(f"{self.path} file exists")

    def __repr__(self) -> str:
        return f"FileExistsProbe({str(self.path)!r})"
