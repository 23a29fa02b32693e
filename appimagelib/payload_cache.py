"""A lookup cache of the entries in an AppImage payload, with link chains resolved."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .core import PayloadEntryType, PayloadIteratorError

__all__ = ["PayloadEntry", "PayloadEntriesCache"]


@dataclass(frozen=True)
class PayloadEntry:
    """One entry of an AppImage payload."""

    path: str
    type: PayloadEntryType
    link_target: str = ""


def _iter_entries(app_image) -> Iterable:
    files = getattr(app_image, "files", None)
    if callable(files):
        return files()
    return app_image


class PayloadEntriesCache:
    """Path, type and final link target of every entry in an AppImage payload.

    ``app_image`` is either an object whose ``files()`` method yields entries,
    or an iterable of entries. Each entry has ``path``, ``type`` and
    ``link_target`` attributes.
    """

    def __init__(self, app_image) -> None:
        self._entries: Dict[str, PayloadEntryType] = {}
        self._links: Dict[str, str] = {}
        self._read_all_entries(app_image)
        self._resolve_links()

    def _read_all_entries(self, app_image) -> None:
        for entry in _iter_entries(app_image):
            entry_type = PayloadEntryType(entry.type)
            self._entries[entry.path] = entry_type
            if entry_type is PayloadEntryType.LINK:
                self._links[entry.path] = entry.link_target

    def _resolve_links(self) -> None:
        # Links are resolved in path order and in place, so later chains
        # see the already resolved targets of earlier ones.
        for path in sorted(self._links):
            target = self._links[path]
            jump = target
            seen = {path}
            while jump in self._links and jump != path:
                if jump in seen:
                    target = path
                    break
                seen.add(jump)
                target = self._links[jump]
                jump = target

            self._links[path] = "" if target == path else target

    def entries_paths(self) -> List[str]:
        """Return the paths of all payload entries in sorted order."""
        return sorted(self._entries)

    def entry_type(self, path: str) -> PayloadEntryType:
        """Return the type of the entry at ``path``."""
        try:
            return self._entries[path]
        except KeyError:
            raise PayloadIteratorError(f"Entry doesn't exists: {path}") from None

    def entry_link_target(self, path: str) -> str:
        """Return the final target of the link at ``path``."""
        try:
            target = self._links[path]
        except KeyError:
            raise PayloadIteratorError(f"Not a link: {path}") from None
        if not target:
            raise PayloadIteratorError(f"Loop found: {path}")
        return target