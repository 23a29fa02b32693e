import pytest

from appimagelib.core import FileSystemError
from appimagelib.xdg import user_home, xdg_cache_home, xdg_config_home, xdg_data_home


VARIABLES = ("XDG_CONFIG_HOME", "XDG_DATA_HOME", "XDG_CACHE_HOME")


def test_user_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    assert user_home() == "/home/tester"


def test_user_home_missing(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(FileSystemError):
        user_home()


def test_fallback_to_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    for variable in VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    assert xdg_config_home() == "/home/tester/.config"
    assert xdg_data_home() == "/home/tester/.local/share"
    assert xdg_cache_home() == "/home/tester/.cache"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    monkeypatch.setenv("XDG_CONFIG_HOME", "/custom/config")
    monkeypatch.setenv("XDG_DATA_HOME", "/custom/data")
    monkeypatch.setenv("XDG_CACHE_HOME", "/custom/cache")
    assert xdg_config_home() == "/custom/config"
    assert xdg_data_home() == "/custom/data"
    assert xdg_cache_home() == "/custom/cache"


def test_empty_variable_is_used_as_is(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    for variable in VARIABLES:
        monkeypatch.setenv(variable, "")
    assert xdg_config_home() == ""
    assert xdg_data_home() == ""
    assert xdg_cache_home() == ""


def test_config_fallback_without_home_raises(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    with pytest.raises(FileSystemError):
        xdg_config_home()


def test_data_fallback_without_home_raises(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    with pytest.raises(FileSystemError):
        xdg_data_home()


def test_cache_fallback_without_home_raises(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    with pytest.raises(FileSystemError):
        xdg_cache_home()