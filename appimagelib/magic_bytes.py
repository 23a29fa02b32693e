"""Detection of magic byte signatures in files."""

from __future__ import annotations

import os
from typing import Union

__all__ = ["MagicBytesChecker"]

_ISO9660_SIGNATURE = b"CD001"
_ISO9660_OFFSETS = (32769, 34817, 36865)
_ELF_SIGNATURE = b"\x7fELF"
_APPIMAGE_TYPE1_SIGNATURE = b"AI\x01"
_APPIMAGE_TYPE2_SIGNATURE = b"AI\x02"
_APPIMAGE_SIGNATURE_OFFSET = 8


class MagicBytesChecker:
    """Checks whether a file carries known magic bytes at known offsets."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = os.fspath(path)

    def _has_signature_at(self, signature: bytes, offset: int) -> bool:
        try:
            with open(self.path, "rb") as stream:
                stream.seek(offset)
                return stream.read(len(signature)) == signature
        except OSError:
            return False

    def has_iso9660_signature(self) -> bool:
        """Return True if an ISO 9660 volume descriptor signature is present."""
        return any(
            self._has_signature_at(_ISO9660_SIGNATURE, offset)
            for offset in _ISO9660_OFFSETS
        )

    def has_elf_signature(self) -> bool:
        """Return True if the file starts with the ELF magic number."""
        return self._has_signature_at(_ELF_SIGNATURE, 0)

    def has_appimage_type1_signature(self) -> bool:
        """Return True if the type 1 AppImage magic is at offset 8."""
        return self._has_signature_at(_APPIMAGE_TYPE1_SIGNATURE, _APPIMAGE_SIGNATURE_OFFSET)

    def has_appimage_type2_signature(self) -> bool:
        """Return True if the type 2 AppImage magic is at offset 8."""
        return self._has_signature_at(_APPIMAGE_TYPE2_SIGNATURE, _APPIMAGE_SIGNATURE_OFFSET)