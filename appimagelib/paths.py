"""Path helpers: file URIs and path hashing for thumbnails and integration files."""

from __future__ import annotations

import os
from typing import Union

from .hashing import md5, to_hex

__all__ = ["path_to_uri", "hash_path"]

_FILE_SCHEME = "file://"


def path_to_uri(path: str) -> str:
    """Prepend ``file://`` to ``path`` unless it already starts with it."""
    if path.startswith(_FILE_SCHEME):
        return path
    return _FILE_SCHEME + path


def hash_path(path: Union[str, os.PathLike]) -> str:
    """Return the MD5 hex digest of the file URI of ``path`` made absolute.

    This is the thumbnail file name hash of the freedesktop thumbnail
    specification. An empty path yields an empty string.
    """
    text = os.fspath(path)
    if not text:
        return ""
    if not os.path.isabs(text):
        text = os.path.join(os.getcwd(), text)
    return to_hex(md5(path_to_uri(text)))