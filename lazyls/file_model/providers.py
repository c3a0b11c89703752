"""Platform capability providers for extended attributes and mount points.

Every provider has a no-op twin so callers never branch on platform
support; the scanner simply receives whichever implementation applies.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class AttributeProvider(Protocol):
    def has_attributes(self, path: Path) -> bool: ...


class MountProvider(Protocol):
    def is_mount_point(self, path: Path) -> bool: ...


class NoAttributes:
    """Used where extended attributes are unsupported or unwanted."""

    def has_attributes(self, path: Path) -> bool:
        return False


class XattrProvider:
    """Reads attribute names through ``os.listxattr`` without following links."""

    def has_attributes(self, path: Path) -> bool:
        try:
            return bool(os.listxattr(path, follow_symlinks=False))
        except OSError as exc:
            logger.debug("listxattr failed for %s: %s", path, exc)
            return False


class NoMounts:
    def is_mount_point(self, path: Path) -> bool:
        return False


class SystemMounts:
    def is_mount_point(self, path: Path) -> bool:
        try:
            return os.path.ismount(path)
        except OSError:
            return False


def default_attribute_provider() -> AttributeProvider:
    """Return the xattr reader when the platform has one."""
    if hasattr(os, "listxattr"):
        return XattrProvider()
    return NoAttributes()


def default_mount_provider() -> MountProvider:
    return SystemMounts()


__all__ = [
    "AttributeProvider",
    "MountProvider",
    "NoAttributes",
    "XattrProvider",
    "NoMounts",
    "SystemMounts",
    "default_attribute_provider",
    "default_mount_provider",
]
