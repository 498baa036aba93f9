"""
Vendor Path - Derive stable patch paths from vendor package locations
"""

from __future__ import annotations

import posixpath

VENDOR_SEGMENT = "vendor"


def normalize_path(path: str) -> str:
    """Convert backslashes to forward slashes"""
    return path.replace("\\", "/")


def extract_vendor_path(path: str) -> str:
    """
    Path used in ``---``/``+++`` headers.

    Everything from the first ``vendor`` segment onward, e.g.
    ``/tmp/build/vendor/acme/widget/src/File.php`` ->
    ``vendor/acme/widget/src/File.php``. Paths without a ``vendor`` segment
    are returned unchanged.
    """
    parts = normalize_path(path).split("/")
    if VENDOR_SEGMENT in parts:
        return "/".join(parts[parts.index(VENDOR_SEGMENT):])
    return path


def trim_vendor_path(path: str) -> str:
    """
    Provider/package pair of a vendor path.

    ``vendor/shopware/core/Framework/Plugin/PluginManager.php`` ->
    ``shopware/core``. The file name is dropped first; paths without a
    ``vendor`` segment followed by two components are returned unchanged.
    """
    normalized = normalize_path(path)
    if "." in posixpath.basename(normalized):
        normalized = posixpath.dirname(normalized)

    parts = normalized.split("/")
    for i, part in enumerate(parts):
        if part == VENDOR_SEGMENT and i + 2 < len(parts):
            return f"{parts[i + 1]}/{parts[i + 2]}"

    return path
