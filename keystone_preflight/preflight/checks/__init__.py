"""
Pre-flight Check Implementations

Individual probe modules for the different validation areas.
"""

from .auth import GcloudAuthProbe
from .files import FileExistsProbe
from .gcp import ProjectIdProbe, RequiredApisProbe
from .storage import BucketExistsProbe
from .terraform import TerraformFormatProbe, TerraformVersionProbe
from .tools import ToolInstalledProbe

__all__ = [
    "BucketExistsProbe",
    "FileExistsProbe",
    "GcloudAuthProbe",
    "ProjectIdProbe",
    "RequiredApisProbe",
    "TerraformFormatProbe",
    "TerraformVersionProbe",
    "ToolInstalledProbe",
]
