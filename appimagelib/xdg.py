"""XDG base directory lookups with their standard fallbacks."""

from __future__ import annotations

import os

from .core import FileSystemError

__all__ = ["user_home", "xdg_config_home", "xdg_data_home", "xdg_cache_home"]


def user_home() -> str:
    """Return the value of ``$HOME``."""
    try:
        return os.environ["HOME"]
    except KeyError:
        raise FileSystemError("HOME environment variable is not set") from None


def _from_env(variable: str, suffix: str) -> str:
    value = os.environ.get(variable)
    if value is None:
        return user_home() + suffix
    return value


def xdg_config_home() -> str:
    """Return ``$XDG_CONFIG_HOME``, or ``~/.config`` when it is unset."""
    return _from_env("XDG_CONFIG_HOME", "/.config")


def xdg_data_home() -> str:
    """Return ``$XDG_DATA_HOME``, or ``~/.local/share`` when it is unset."""
    return _from_env("XDG_DATA_HOME", "/.local/share")


def xdg_cache_home() -> str:
    """Return ``$XDG_CACHE_HOME``, or ``~/.cache`` when it is unset."""
    return _from_env("XDG_CACHE_HOME", "/.cache")