from __future__ import annotations

import enum


# Magic and version
WAD_MAGIC = "RW"
MAX_VERSION_MAJOR = 3

# Signature area
V2_SIGNATURE_AREA_SIZE = 83  # length byte L, then (83 - L) signature bytes
V3_SIGNATURE_SIZE = 256

# Entry layout
CHECKSUM_SIZE = 8
ENTRY_BASE_SIZE = 24  # hash, offset, sizes, format, duplicate flag, reserved


class EntryDataFormat(enum.IntEnum):
    RAW = 0
    GZIP = 1
    FILE_REDIRECTION = 2
    ZSTD = 3
    UNKNOWN = 4


class ChecksumKind(enum.Enum):
    NONE = "none"
    SHA256 = "sha256"
    XXHASH3 = "xxhash3"
