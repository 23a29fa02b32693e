"""MD5 digest of type 2 AppImages that leaves out the signature related sections."""

from __future__ import annotations

import os
from typing import List, Tuple, Union

from .core import FileSystemError
from .elf import get_elf_section_offset_and_length
from .md5 import Md5

__all__ = ["type2_digest_md5"]

_CHUNK_SIZE = 4096

# The digest is embedded in the first section and the signature and key are
# added after it is computed, so none of them may contribute to it.
_SKIPPED_SECTIONS = (".digest_md5", ".sha256_sig", ".sig_key")


def _skipped_ranges(path: str) -> List[Tuple[int, int]]:
    ranges = []
    for name in _SKIPPED_SECTIONS:
        offset, length = get_elf_section_offset_and_length(path, name)
        if offset and length:
            ranges.append((offset, offset + length))
    return ranges


def type2_digest_md5(path: Union[str, os.PathLike]) -> bytes:
    """Return the raw 16-byte MD5 digest of a type 2 AppImage.

    The file is hashed in 4096-byte chunks. The bytes of the ``.digest_md5``,
    ``.sha256_sig`` and ``.sig_key`` sections count as zero bytes, and the last
    chunk is filled up with zero bytes, so the result differs from ``md5sum``.
    """
    fname = os.fspath(path)
    skipped = _skipped_ranges(fname)

    hasher = Md5()
    try:
        stream = open(fname, "rb")
    except OSError as exc:
        raise FileSystemError(f"Cannot open {fname}: {exc.strerror or exc}") from exc

    with stream:
        position = 0
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            block = bytearray(chunk.ljust(_CHUNK_SIZE, b"\0"))
            end = position + _CHUNK_SIZE
            for start, stop in skipped:
                low = max(start, position)
                high = min(stop, end)
                if low < high:
                    block[low - position:high - position] = bytes(high - low)
            hasher.update(bytes(block))
            position = end

    return hasher.digest()