"""Convenience helpers around the MD5 implementation and hex encoding."""

from __future__ import annotations

from typing import BinaryIO, Iterable, Union

from .md5 import Md5

__all__ = ["md5", "to_hex", "hexlify"]

_CHUNK_SIZE = 4096


def md5(data: Union[bytes, bytearray, memoryview, str, BinaryIO]) -> bytes:
    """Return the MD5 digest of bytes, text (UTF-8 encoded) or a binary stream."""
    hasher = Md5()
    if isinstance(data, str):
        hasher.update(data.encode("utf-8"))
    elif isinstance(data, (bytes, bytearray, memoryview)):
        hasher.update(data)
    else:
        for chunk in iter(lambda: data.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.digest()


def to_hex(digest: Iterable[int]) -> str:
    """Return the lower-case hexadecimal representation of ``digest``."""
    return bytes(digest).hex()


def hexlify(data: Iterable[int]) -> str:
    """Return a string where every byte of ``data`` becomes two hex characters."""
    return bytes(data).hex()