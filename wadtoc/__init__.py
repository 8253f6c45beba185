"""
wadtoc: read the header and table of contents of "RW" WAD archives.

Supports header versions 1 through 3 (and the headerless 0 layout):

- Magic and version validation, with v2 length-prefixed and v3 fixed signatures
- Legacy v1/v2 TOC fields skipped
- Per-entry path hash, offset, compressed/uncompressed sizes, data format,
  duplicate flag and 8-byte checksum (SHA-256 prefix, or XXH3 for 3.1)
- Directory keyed by path hash; duplicate hashes are rejected

Payload bytes are never read or decompressed.
"""

from .constants import ChecksumKind, EntryDataFormat
from .entry import Entry, EntryDataChecksum
from .errors import (
    DuplicateEntry,
    InvalidSignature,
    InvalidSignatureLength,
    UnknownEntryDataFormat,
    UnsupportedVersion,
    WadError,
)
from .wad import Wad, read_wad

__version__ = "0.1"

__all__ = [
    "ChecksumKind",
    "DuplicateEntry",
    "Entry",
    "EntryDataChecksum",
    "EntryDataFormat",
    "InvalidSignature",
    "InvalidSignatureLength",
    "UnknownEntryDataFormat",
    "UnsupportedVersion",
    "Wad",
    "WadError",
    "read_wad",
]
