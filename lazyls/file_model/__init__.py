"""File records and the scanner that produces them."""

from .fs import ScanContext, build_tree_rows, list_directory, record_for_path, record_from_stat
from .providers import (
    AttributeProvider,
    MountProvider,
    NoAttributes,
    NoMounts,
    SystemMounts,
    XattrProvider,
    default_attribute_provider,
    default_mount_provider,
)
from .types import (
    DirectoryContext,
    FileKind,
    FileRecord,
    GitPair,
    GitStatus,
    Links,
    Permissions,
    Timestamps,
    extension_of,
)

__all__ = [
    "AttributeProvider",
    "DirectoryContext",
    "FileKind",
    "FileRecord",
    "GitPair",
    "GitStatus",
    "Links",
    "MountProvider",
    "NoAttributes",
    "NoMounts",
    "Permissions",
    "ScanContext",
    "SystemMounts",
    "Timestamps",
    "XattrProvider",
    "build_tree_rows",
    "default_attribute_provider",
    "default_mount_provider",
    "extension_of",
    "list_directory",
    "record_for_path",
    "record_from_stat",
]
