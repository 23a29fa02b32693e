"""Core types shared across the package: image formats, payload entry types and errors."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "AppImageFormat",
    "PayloadEntryType",
    "AppImageError",
    "FileSystemError",
    "AppImageIOError",
    "PayloadIteratorError",
    "DesktopIntegrationError",
]


class AppImageFormat(IntEnum):
    """How an AppImage is laid out on disk."""

    INVALID = -1  # not an AppImage file
    LEGACY = 0  # portable binaries that look like AppImages but do not follow the standard
    TYPE_1 = 1  # ISO 9660 based image
    TYPE_2 = 2  # SquashFS based image


class PayloadEntryType(IntEnum):
    """Kinds of entries found inside an AppImage payload."""

    UNKNOWN = -1  # another kind of entry, could be a special file
    REGULAR = 0  # regular file
    DIR = 1  # directory
    LINK = 2  # hard or symbolic link


class AppImageError(RuntimeError):
    """Generic error raised by AppImage procedures."""


class FileSystemError(AppImageError):
    """Missing files, insufficient permissions and other file system errors."""


class AppImageIOError(AppImageError):
    """Failure in a read or write operation."""


class PayloadIteratorError(AppImageError):
    """Failure while iterating over or looking up payload entries."""


class DesktopIntegrationError(AppImageError):
    """Failure while performing a desktop integration operation."""