"""
Semantic Version Comparison

Parses tool version strings and compares them against allowed bounds.
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple, Union

_VERSION_RE = re.compile(
    r"^v?(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+[0-9A-Za-z.-]+)?$"
)


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """A parsed MAJOR.MINOR.PATCH[-prerelease] version."""
    major: int
    minor: int
    patch: int = 0
    prerelease: Tuple[str, ...] = ()

    def _key(self) -> tuple:
        # A release sorts after any of its prereleases.
        pre = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part)
            for part in self.prerelease
        )
        return (self.major, self.minor, self.patch, not self.prerelease, pre)

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        return text


def parse_version(text: str) -> SemanticVersion:
    """
    Parse a version string such as "1.10.0", "v1.6" or "1.7.0-beta1".

    Build metadata ("+abc") is accepted and ignored.

    Raises:
        ValueError: If the text is not a recognizable version
    """
    match = _VERSION_RE.match((text or "").strip())
    if not match:
        raise ValueError(f"Invalid version: {text!r}")

    prerelease = match.group("prerelease")
    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch") or 0),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
    )


def version_satisfies(
    version: Union[str, SemanticVersion],
    minimum: Union[str, SemanticVersion],
    maximum: Optional[Union[str, SemanticVersion]] = None,
) -> bool:
    """
    Check that minimum <= version < maximum.

    Args:
        version: Version to test
        minimum: Inclusive lower bound
        maximum: Exclusive upper bound, or None for no upper bound

    Returns:
        True if the version falls within the range
    """
    if isinstance(version, str):
        version = parse_version(version)
    if isinstance(minimum, str):
        minimum = parse_version(minimum)
    if isinstance(maximum, str):
        maximum = parse_version(maximum)

    if version < minimum:
        return False
    if maximum is not None and version >= maximum:
        return False
    return True
