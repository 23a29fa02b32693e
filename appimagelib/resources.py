"""Locating and extracting the payload resources needed for desktop integration."""

from __future__ import annotations

import os
from typing import Dict, Iterable, Iterator, List, Mapping, Union

from .core import AppImageError, PayloadEntryType, PayloadIteratorError
from .payload_cache import PayloadEntriesCache

__all__ = ["ResourcesExtractor"]

_ICONS_DIR = "usr/share/icons"
_MIME_PREFIX = "usr/share/mime/packages/"
_MIME_SUFFIX = ".xml"
_DESKTOP_SUFFIX = ".desktop"


def _is_icon_file(path: str) -> bool:
    return _ICONS_DIR in path


def _is_main_desktop_file(path: str) -> bool:
    return _DESKTOP_SUFFIX in path and "/" not in path


def _is_mime_file(path: str) -> bool:
    return (
        path.startswith(_MIME_PREFIX)
        and path.endswith(_MIME_SUFFIX)
        and len(path) > len(_MIME_PREFIX) + len(_MIME_SUFFIX)
    )


def _read_entry(entry) -> bytes:
    content = entry.read()
    if hasattr(content, "read"):
        content = content.read()
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


class ResourcesExtractor:
    """Finds and extracts the files used to integrate an AppImage into the desktop.

    ``app_image`` is either an object whose ``files()`` method yields payload
    entries, or a re-iterable collection of entries. Each entry has ``path``,
    ``type`` and ``link_target`` attributes and a ``read()`` method returning
    its content. Links are resolved through a cache built once up front.
    """

    def __init__(self, app_image) -> None:
        self._app_image = app_image
        self._cache = PayloadEntriesCache(app_image)

    def _files(self) -> Iterator:
        files = getattr(self._app_image, "files", None)
        source: Iterable = files() if callable(files) else self._app_image
        return iter(source)

    def _resolve(self, path: str) -> str:
        if self._cache.entry_type(path) is PayloadEntryType.LINK:
            return self._cache.entry_link_target(path)
        return path

    def extract(self, path: str) -> bytes:
        """Return the content of the entry at ``path``, following links."""
        regular_path = self._resolve(path)
        for entry in self._files():
            if entry.path == regular_path:
                return _read_entry(entry)
        raise PayloadIteratorError(f"Entry doesn't exists: {path}")

    def extract_many(self, paths: Iterable[str]) -> Dict[str, bytes]:
        """Return the contents of several entries keyed by the requested paths."""
        reverse_links: Dict[str, str] = {}
        for path in paths:
            reverse_links[self._resolve(path)] = path

        result: Dict[str, bytes] = {}
        for entry in self._files():
            original = reverse_links.get(entry.path)
            if original is not None:
                result[original] = _read_entry(entry)
        return result

    def extract_to(self, targets_map: Mapping[str, Union[str, os.PathLike]]) -> None:
        """Write each entry named by a key of ``targets_map`` to the path it maps to.

        Links are resolved to the regular entries they point to. Parent
        directories of the targets are created as needed.
        """
        real_targets: Dict[str, str] = {}
        for source in sorted(targets_map):
            target = os.fspath(targets_map[source])
            if self._cache.entry_type(source) is PayloadEntryType.LINK:
                real_targets[self._cache.entry_link_target(source)] = target
            else:
                real_targets.setdefault(source, target)

        for entry in self._files():
            target = real_targets.get(entry.path)
            if target is None:
                continue

            print(f'Extracting {entry.path} to "{target}"')

            parent = os.path.dirname(target)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(target, "wb") as stream:
                stream.write(_read_entry(entry))

    def extract_text(self, path: str) -> str:
        """Return the content of a text entry at ``path``, following links."""
        return self.extract(path).decode("utf-8", errors="replace")

    def desktop_entry_path(self) -> str:
        """Return the path of the main desktop entry at the payload root."""
        for entry in self._files():
            if _is_main_desktop_file(entry.path):
                return entry.path
        raise AppImageError("Missing Desktop Entry")

    def icon_file_paths(self, icon_name: str) -> List[str]:
        """Return the paths under ``usr/share/icons`` whose path contains ``icon_name``."""
        return [
            path
            for path in self._cache.entries_paths()
            if _is_icon_file(path) and icon_name in path
        ]

    def mime_type_packages_paths(self) -> List[str]:
        """Return the paths of the MIME type package files in ``usr/share/mime/packages``."""
        return [path for path in self._cache.entries_paths() if _is_mime_file(path)]