import hashlib
import io

from appimagelib.hashing import hexlify, md5, to_hex


def test_md5_of_bytes_matches_reference():
    data = b"file:///tmp/app.AppImage"
    assert md5(data) == hashlib.md5(data).digest()


def test_md5_of_text_uses_utf8():
    text = "file:///home/usuário/app.AppImage"
    assert md5(text) == hashlib.md5(text.encode("utf-8")).digest()


def test_md5_of_stream_equals_md5_of_bytes():
    data = bytes(range(256)) * 40  # spans several read chunks
    assert md5(io.BytesIO(data)) == md5(data)


def test_md5_of_empty_stream():
    assert md5(io.BytesIO(b"")) == md5(b"")
    assert to_hex(md5(b"")) == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_digest_length():
    assert len(md5(b"anything")) == 16


def test_to_hex_pads_each_byte():
    assert to_hex([0, 1, 255]) == "0001ff"


def test_to_hex_round_trip():
    data = bytes(range(256))
    encoded = to_hex(data)
    assert len(encoded) == 2 * len(data)
    assert bytes.fromhex(encoded) == data


def test_hexlify_agrees_with_to_hex():
    data = b"\x00\x10\xab\xcd\xef"
    assert hexlify(data) == to_hex(data)
    assert hexlify(data) == hexlify(data).lower()


def test_hexlify_empty():
    assert hexlify(b"") == ""


def test_to_hex_of_md5_matches_reference_hexdigest():
    data = b"payload"
    assert to_hex(md5(data)) == hashlib.md5(data).hexdigest()