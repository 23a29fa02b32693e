"""Reading just enough of ELF files to size them and locate named sections."""

from __future__ import annotations

import mmap
import os
import struct
import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterator, NamedTuple, Tuple, Union

from .core import AppImageError, AppImageIOError, FileSystemError

__all__ = [
    "elf_size",
    "get_elf_section_offset_and_length",
    "read_file_range",
    "print_hex",
    "print_binary",
]

PathLike = Union[str, os.PathLike]

EI_NIDENT = 16
EI_CLASS = 4
EI_DATA = 5
ELFCLASS32 = 1
ELFCLASS64 = 2
ELFDATA2LSB = 1
ELFDATA2MSB = 2

_BYTE_ORDERS = {ELFDATA2LSB: "<", ELFDATA2MSB: ">"}


@dataclass(frozen=True)
class _Layout:
    """Struct formats of the ELF and section headers for one ELF class."""

    ehdr: str
    shdr: str


_LAYOUTS = {
    ELFCLASS32: _Layout(ehdr="16sHHIIIIIHHHHHH", shdr="10I"),
    ELFCLASS64: _Layout(ehdr="16sHHIQQQIHHHHHH", shdr="IIQQQQIIQQ"),
}


class _Header(NamedTuple):
    shoff: int
    shentsize: int
    shnum: int
    shstrndx: int


class _Section(NamedTuple):
    name: int
    offset: int
    size: int


def _open(path: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise FileSystemError(f"Cannot open {path}: {exc.strerror or exc}") from exc


def _parse_header(raw: bytes, order: str, layout: _Layout) -> _Header:
    fields = struct.unpack(order + layout.ehdr, raw)
    return _Header(shoff=fields[6], shentsize=fields[11], shnum=fields[12], shstrndx=fields[13])


def _parse_section(raw: bytes, order: str, layout: _Layout) -> _Section:
    fields = struct.unpack(order + layout.shdr, raw)
    return _Section(name=fields[0], offset=fields[4], size=fields[5])


def _read_exact(stream: BinaryIO, size: int, what: str, path: str) -> bytes:
    raw = stream.read(size)
    if len(raw) != size:
        raise AppImageIOError(f"Read of {what} from {path} failed")
    return raw


def elf_size(path: PathLike) -> int:
    """Return the size of the ELF file at ``path`` as described by its headers.

    An ELF file ends either with its section header table or with its last
    section, whichever lies further. Anything appended after that (such as
    an AppImage payload) is not counted.
    """
    fname = os.fspath(path)
    with _open(fname) as stream:
        ident = stream.read(EI_NIDENT)
        if len(ident) != EI_NIDENT:
            raise AppImageIOError(f"Read of e_ident from {fname} failed")

        order = _BYTE_ORDERS.get(ident[EI_DATA])
        if order is None:
            raise AppImageError(f"Unknown ELF data order {ident[EI_DATA]}")
        layout = _LAYOUTS.get(ident[EI_CLASS])
        if layout is None:
            raise AppImageError(f"Unknown ELF class: {ident[EI_CLASS]}")

        stream.seek(0)
        header = _parse_header(
            _read_exact(stream, struct.calcsize(order + layout.ehdr), "ELF header", fname),
            order,
            layout,
        )

        last_shdr_offset = header.shoff + header.shentsize * (header.shnum - 1)
        if last_shdr_offset < 0:
            raise AppImageIOError(f"Read of ELF section header from {fname} failed")
        stream.seek(last_shdr_offset)
        last_section = _parse_section(
            _read_exact(stream, struct.calcsize(order + layout.shdr), "ELF section header", fname),
            order,
            layout,
        )

    sht_end = header.shoff + header.shentsize * header.shnum
    last_section_end = last_section.offset + last_section.size
    return max(sht_end, last_section_end)


def _iter_sections(
    data: Union[bytes, mmap.mmap], order: str, layout: _Layout, header: _Header
) -> Iterator[_Section]:
    shdr_format = order + layout.shdr
    stride = struct.calcsize(shdr_format)
    for index in range(header.shnum):
        raw = struct.unpack_from(shdr_format, data, header.shoff + index * stride)
        yield _Section(name=raw[0], offset=raw[4], size=raw[5])


def _section_name(data: Union[bytes, mmap.mmap], start: int) -> bytes:
    if start >= len(data):
        raise AppImageError("Section name lies outside of the file")
    end = data.find(b"\0", start)
    if end < 0:
        end = len(data)
    return data[start:end]


def _lookup_section(data: Union[bytes, mmap.mmap], section_name: bytes) -> Tuple[int, int]:
    if len(data) < EI_NIDENT:
        raise AppImageIOError("File is too short to be an ELF file")

    layout = _LAYOUTS.get(data[EI_CLASS])
    if layout is None:
        raise AppImageError("Platforms other than 32-bit/64-bit are currently not supported!")
    order = _BYTE_ORDERS.get(data[EI_DATA], "<")

    try:
        header = _parse_header(
            bytes(data[: struct.calcsize(order + layout.ehdr)]), order, layout
        )
        sections = list(_iter_sections(data, order, layout, header))
    except struct.error as exc:
        raise AppImageError(f"Malformed ELF headers: {exc}") from exc

    if header.shstrndx >= len(sections):
        raise AppImageError("Section name string table index is out of range")
    string_table = sections[header.shstrndx].offset

    found = (0, 0)
    for section in sections:
        if _section_name(data, string_table + section.name) == section_name:
            found = (section.offset, section.size)
    return found


def get_elf_section_offset_and_length(path: PathLike, section_name: str) -> Tuple[int, int]:
    """Return ``(offset, length)`` of the section called ``section_name``.

    When several sections share the name, the last one wins. When none has
    it, ``(0, 0)`` is returned.
    """
    fname = os.fspath(path)
    wanted = section_name.encode("utf-8")
    with _open(fname) as stream:
        file_size = os.fstat(stream.fileno()).st_size
        if file_size == 0:
            raise AppImageIOError(f"{fname} is empty")
        with mmap.mmap(stream.fileno(), 0, access=mmap.ACCESS_READ) as data:
            return _lookup_section(data, wanted)


def read_file_range(path: PathLike, offset: int, length: int) -> bytes:
    """Return up to ``length`` bytes of the file at ``path`` starting at ``offset``."""
    fname = os.fspath(path)
    with _open(fname) as stream:
        stream.seek(offset)
        return stream.read(length)


def _until_nul(data: bytes) -> bytes:
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def print_hex(path: PathLike, offset: int, length: int) -> str:
    """Print the bytes of a file range in hexadecimal, stopping at the first NUL byte.

    Each byte is written without padding and as a signed char, so bytes of
    0x80 and above appear sign-extended to 32 bits. Returns the printed text.
    """
    data = _until_nul(read_file_range(path, offset, length))
    text = "".join(f"{(b - 256 if b >= 0x80 else b) & 0xFFFFFFFF:x}" for b in data)
    print(text)
    return text


def print_binary(path: PathLike, offset: int, length: int) -> str:
    """Print a file range as text, up to its first NUL byte. Returns the printed text."""
    data = _until_nul(read_file_range(path, offset, length))
    text = data.decode(sys.getfilesystemencoding(), errors="replace")
    print(text)
    return text