"""Sanitising strings for safe inclusion in file names and paths."""

from __future__ import annotations

import string

__all__ = ["sanitize_for_path"]

_SAFE_BYTES = frozenset((string.ascii_letters + string.digits + ".-_").encode("ascii"))
_REPLACEMENT = ord("_")


def sanitize_for_path(text: str) -> str:
    """Replace every byte that is not an ASCII letter, digit, '.', '-' or '_' by '_'.

    The text is handled as UTF-8 bytes, so a multi-byte character becomes
    several underscores.
    """
    raw = text.encode("utf-8")
    return bytes(b if b in _SAFE_BYTES else _REPLACEMENT for b in raw).decode("ascii")