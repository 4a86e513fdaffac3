"""Configuration handling for the preflight checks."""

from .models import PreflightConfig
from .loader import ConfigLoader, load_config

__all__ = [
    "PreflightConfig",
    "ConfigLoader",
    "load_config",
]
