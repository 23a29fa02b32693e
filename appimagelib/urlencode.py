"""Minimal percent-encoding of URI components."""

from __future__ import annotations

import string

__all__ = ["url_encode"]

_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~/").encode("ascii"))


def url_encode(value: str) -> str:
    """Percent-encode ``value`` byte by byte, keeping alphanumerics and ``-_.~/``."""
    return "".join(
        chr(b) if b in _UNRESERVED else f"%{b:02X}" for b in value.encode("utf-8")
    )