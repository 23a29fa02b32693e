"""A self-contained MD5 implementation."""

from __future__ import annotations

import struct

__all__ = ["Md5", "md5_calculate"]

_MASK = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_BLOCK_SIZE = 64


def _rotl(value: int, shift: int) -> int:
    value &= _MASK
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Process one 64-byte block and return the new state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step, (constant, shift) in enumerate(zip(_K, _SHIFTS)):
        if step < 16:
            f = d ^ (b & (c ^ d))
            g = step
        elif step < 32:
            f = c ^ (d & (b ^ c))
            g = (5 * step + 1) % 16
        elif step < 48:
            f = b ^ c ^ d
            g = (3 * step + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK))
            g = (7 * step) % 16
        f = (f + a + constant + words[g]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotl(f, shift)) & _MASK
    return tuple((old + new) & _MASK for old, new in zip(state, (a, b, c, d)))  # type: ignore[return-value]


class Md5:
    """Incremental MD5 hasher with a hashlib-like interface."""

    digest_size = 16
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(memoryview(data))
        self._length += len(chunk)
        pending = self._buffer + chunk
        full = len(pending) - len(pending) % _BLOCK_SIZE
        view = memoryview(pending)
        state = self._state
        for start in range(0, full, _BLOCK_SIZE):
            state = _compress(state, view[start:start + _BLOCK_SIZE].tobytes())
        self._state = state
        self._buffer = pending[full:]

    def copy(self) -> "Md5":
        """Return an independent copy of the current hashing state."""
        other = Md5()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        padding = b"\x80" + b"\x00" * ((55 - len(self._buffer)) % _BLOCK_SIZE)
        bit_length = struct.pack("<Q", (self._length * 8) & 0xFFFFFFFFFFFFFFFF)
        tail = self._buffer + padding + bit_length
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[start:start + _BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as a lower-case hexadecimal string."""
        return self.digest().hex()


def md5_calculate(data: bytes) -> bytes:
    """Return the MD5 digest of ``data``."""
    return Md5(data).digest()