"""Inspect AppImage files: magic bytes, ELF layout, digests, path hashing and payload resources."""

__version__ = "0.1.0"