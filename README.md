# appimagelib

A small library for inspecting AppImage files. It uses only the Python
standard library.

## Modules

- `appimagelib.core`: the `AppImageFormat` enum (`INVALID`, `LEGACY`, `TYPE_1`,
  `TYPE_2`), the `PayloadEntryType` enum (`UNKNOWN`, `REGULAR`, `DIR`, `LINK`)
  and the exceptions. `AppImageError` is the base class. `FileSystemError`,
  `AppImageIOError`, `PayloadIteratorError` and `DesktopIntegrationError`
  derive from it.
- `appimagelib.md5`: an incremental MD5 hasher, `Md5`, with `update`,
  `digest`, `hexdigest` and `copy`. There is also a one-shot `md5_calculate(data)`.
- `appimagelib.hashing`: `md5(data)` takes bytes, text (encoded as UTF-8) or a
  binary stream. `to_hex(digest)` and `hexlify(data)` turn bytes into lower-case
  hex.
- `appimagelib.logger`: a shared `Logger` whose messages go to a replaceable
  callback. By default each message is written to standard error as
  `LEVEL: message`. The module also provides `get_logger`,
  `set_logger_callback`, `debug`, `info`, `warning`, `error` and the `LogLevel`
  enum.
- `appimagelib.magic_bytes`: `MagicBytesChecker(path)` has four methods.
  `has_elf_signature` looks for `\x7fELF` at offset 0. `has_iso9660_signature`
  looks for `CD001` at offset 32769, 34817 or 36865.
  `has_appimage_type1_signature` looks for `AI\x01` at offset 8, and
  `has_appimage_type2_signature` for `AI\x02` at offset 8. A file that cannot be
  read gives `False`.
- `appimagelib.sanitize`: `sanitize_for_path(text)` replaces every UTF-8 byte
  that is not an ASCII letter, a digit, `.`, `-` or `_` with `_`.
- `appimagelib.urlencode`: `url_encode(value)` percent-encodes every UTF-8 byte
  except alphanumerics and `-_.~/`. The hex digits are upper case.
- `appimagelib.paths`: `path_to_uri(path)` adds `file://` when it is missing.
  `hash_path(path)` returns the MD5 hex digest of the `file://` URI of the
  path, made absolute. This is the hash the freedesktop thumbnail
  specification uses for file names. An empty path gives `""`.
- `appimagelib.xdg`: `user_home()` returns `$HOME` and raises `FileSystemError`
  when it is unset. `xdg_config_home()`, `xdg_data_home()` and
  `xdg_cache_home()` return their environment variable, or fall back to
  `~/.config`, `~/.local/share` and `~/.cache`.
- `appimagelib.elf` provides:
  - `elf_size(path)`: where the ELF file ends according to its headers, which
    is the end of the section header table or of the last section, whichever
    comes later.
  - `get_elf_section_offset_and_length(path, name)`: returns
    `(offset, length)` for the named section. If several sections share the
    name, the last one wins. If none has it, the result is `(0, 0)`.
  - `read_file_range(path, offset, length)`: the bytes in that range.
  - `print_hex` and `print_binary`: they print a file range up to its first NUL
    byte and return the printed text.
- `appimagelib.digest`: `type2_digest_md5(path)` returns the raw 16-byte MD5 of
  a type 2 AppImage. The file is hashed in 4096-byte chunks. The bytes of the
  `.digest_md5`, `.sha256_sig` and `.sig_key` sections count as zeros, and the
  last chunk is padded with zeros. The result therefore differs from `md5sum`.
- `appimagelib.payload_cache`: `PayloadEntriesCache` indexes payload entries
  (the `PayloadEntry` dataclass, or any object with `path`, `type` and
  `link_target`) and resolves chains of links. It provides `entries_paths()`,
  `entry_type(path)` and `entry_link_target(path)`. Unknown paths, non-links
  and link loops raise `PayloadIteratorError`.
- `appimagelib.resources`: `ResourcesExtractor` finds and extracts desktop
  integration files. It provides:
  - `desktop_entry_path()`: the `.desktop` file at the payload root.
  - `icon_file_paths(name)`: entries under `usr/share/icons` whose path
    contains `name`.
  - `mime_type_packages_paths()`: the `.xml` files under
    `usr/share/mime/packages/`.
  - `extract`, `extract_many` and `extract_text`: return content, following
    links.
  - `extract_to({entry: target_path})`: writes entries to disk and creates
    parent directories.

## Examples

```python
from appimagelib.magic_bytes import MagicBytesChecker
from appimagelib.elf import elf_size
from appimagelib.digest import type2_digest_md5
from appimagelib.hashing import to_hex
from appimagelib.paths import hash_path

checker = MagicBytesChecker("Example.AppImage")
if checker.has_elf_signature() and checker.has_appimage_type2_signature():
    print("payload starts at", elf_size("Example.AppImage"))
    print("digest", to_hex(type2_digest_md5("Example.AppImage")))

print("id", hash_path("Example.AppImage"))
```

Working with payload entries that you supply yourself:

```python
from dataclasses import dataclass
from appimagelib.core import PayloadEntryType
from appimagelib.resources import ResourcesExtractor

@dataclass
class Entry:
    path: str
    type: PayloadEntryType
    link_target: str = ""
    content: bytes = b""

    def read(self):
        return self.content

entries = [
    Entry("app.desktop", PayloadEntryType.REGULAR, content=b"[Desktop Entry]\nIcon=app\n"),
    Entry("usr/share/icons/hicolor/48x48/apps/app.png", PayloadEntryType.REGULAR, content=b"..."),
    Entry(".DirIcon", PayloadEntryType.LINK, link_target="usr/share/icons/hicolor/48x48/apps/app.png"),
]

extractor = ResourcesExtractor(entries)
print(extractor.desktop_entry_path())   # app.desktop
print(extractor.icon_file_paths("app"))
print(extractor.extract(".DirIcon"))     # the PNG bytes, reached through the link
```

Sending log messages somewhere else:

```python
from appimagelib.logger import set_logger_callback

set_logger_callback(lambda level, message: print(level.name, message))
```

## What it does not do

- It does not open the SquashFS or ISO 9660 payload of an AppImage itself.
  `PayloadEntriesCache` and `ResourcesExtractor` work on entries that the
  caller provides, either an iterable or an object with a `files()` method.
- It does not register AppImages with the desktop or unregister them, does not
  create thumbnails, and does not convert or resize icons.
- It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```