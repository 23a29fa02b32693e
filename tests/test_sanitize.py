import string

import pytest

from appimagelib.sanitize import sanitize_for_path


def test_safe_characters_unchanged():
    text = string.ascii_letters + string.digits + ".-_"
    assert sanitize_for_path(text) == text


def test_empty_string():
    assert sanitize_for_path("") == ""


def test_unsafe_characters_replaced():
    assert sanitize_for_path("My App/1.0 beta") == "My_App_1.0_beta"


@pytest.mark.parametrize("text", ["a b", "x/y", "p\\q", "tab\there", "nul\0byte", "a:b*c?"])
def test_only_safe_characters_remain(text):
    result = sanitize_for_path(text)
    allowed = set(string.ascii_letters + string.digits + ".-_")
    assert set(result) <= allowed
    assert len(result) == len(text.encode("utf-8"))


def test_multibyte_character_replaced_per_byte():
    assert sanitize_for_path("\u00e4") == "__"


def test_idempotent():
    once = sanitize_for_path("weird name (copy) #2")
    assert sanitize_for_path(once) == once