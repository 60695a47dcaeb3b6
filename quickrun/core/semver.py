from enum import Enum

SemVer = tuple[int, int, int]


class VersionOrder(Enum):
    GREATER = 1
    LESS = -1
    EQUAL = 0


def parse_semver(value: str) -> SemVer | None:
    """Parses a `major.minor.patch` string.

    Exactly three dot-separated, all-digit components are required. Any other
    shape (`1.2`, `1.2.3.4`, `a.b.c`, `.1.2`) is unparseable.

    Returns:
        The version triple, or None if the string is unparseable.
    """
    parts = value.split(".")
    if len(parts) != 3:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    major, minor, patch = (int(part) for part in parts)
    return major, minor, patch


def compare_versions(a: str, b: str) -> VersionOrder:
    """Compares two version strings.

    If either side is unparseable the result is EQUAL, so a malformed tag never
    reports an update as available.
    """
    left = parse_semver(a)
    right = parse_semver(b)
    if left is None or right is None:
        return VersionOrder.EQUAL
    if left > right:
        return VersionOrder.GREATER
    if left < right:
        return VersionOrder.LESS
    return VersionOrder.EQUAL


def derive_version(tag: str, marker: str = "v") -> str:
    """Strips a single leading version marker from a release tag (`v1.5.0` -> `1.5.0`)."""
    if tag.startswith(marker):
        return tag[len(marker) :]
    return tag
