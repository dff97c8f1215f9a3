"""Lifecycle annotations carried in free-text argument descriptions."""

from typing import NamedTuple

EXPERIMENTAL_MARKER = "(experimental)"
DEPRECATED_MARKER = "(DEPRECATED)"
REMOVED_PREFIX = "Removed, "


class Annotations(NamedTuple):
    experimental: bool = False
    deprecated: bool = False


def classify_annotations(description: str) -> Annotations:
    """Derive lifecycle flags from an argument description.

    >>> classify_annotations("Use the new format. (experimental)")
    Annotations(experimental=True, deprecated=False)
    """
    return Annotations(
        experimental=EXPERIMENTAL_MARKER in description,
        deprecated=DEPRECATED_MARKER in description or description.startswith(REMOVED_PREFIX),
    )
