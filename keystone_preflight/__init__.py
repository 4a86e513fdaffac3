"""
Keystone Preflight

Deployment-readiness gate: runs environment checks and decides whether
a deployment may proceed.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
