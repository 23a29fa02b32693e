import hashlib

import pytest

from appimagelib.md5 import Md5, md5_calculate


def test_empty_input_vector():
    assert Md5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc_vector():
    assert Md5(b"abc").hexdigest() == "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("size", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000, 4097])
def test_matches_reference_for_boundary_sizes(size):
    data = bytes((i * 7 + 3) % 256 for i in range(size))
    assert md5_calculate(data) == hashlib.md5(data).digest()


def test_incremental_updates_equal_one_shot():
    data = bytes(range(256)) * 5
    hasher = Md5()
    for piece in (data[:1], data[1:70], data[70:500], data[500:]):
        hasher.update(piece)
    assert hasher.digest() == md5_calculate(data)


def test_digest_does_not_consume_state():
    hasher = Md5(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == hashlib.md5(b"hello world").digest()


def test_copy_is_independent():
    hasher = Md5(b"prefix")
    clone = hasher.copy()
    clone.update(b"-more")
    assert hasher.digest() == hashlib.md5(b"prefix").digest()
    assert clone.digest() == hashlib.md5(b"prefix-more").digest()


def test_hexdigest_is_hex_of_digest():
    hasher = Md5(b"some data")
    assert bytes.fromhex(hasher.hexdigest()) == hasher.digest()
    assert len(hasher.digest()) == 16


def test_accepts_bytearray_and_memoryview():
    data = b"buffer protocol"
    assert Md5(bytearray(data)).digest() == Md5(memoryview(data)).digest() == md5_calculate(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        Md5().update("text")