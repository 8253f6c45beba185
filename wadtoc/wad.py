from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import BinaryIO, Dict, List, Mapping, Optional, Union

from .binreader import BinaryReader
from .constants import WAD_MAGIC
from .entry import Entry, read_entry
from .errors import DuplicateEntry, InvalidSignature, InvalidSignatureLength
from .layout import SIG_FIXED, SIG_LENGTH_PREFIXED, WadLayout, layout_for


@dataclass(frozen=True)
class Wad:
    version_major: int
    version_minor: int
    signature: bytes
    entries: Mapping[int, Entry]

    @classmethod
    def mount_from_path(cls, path: Union[str, os.PathLike]) -> "Wad":
        with open(path, "rb") as f:
            return cls.read(f)

    @classmethod
    def read(cls, f: BinaryIO) -> "Wad":
        return read_wad(f)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, xxhash: object) -> bool:
        return xxhash in self.entries

    def get(self, xxhash: int) -> Optional[Entry]:
        return self.entries.get(xxhash)

    def entry(self, xxhash: int) -> Entry:
        return self.entries[xxhash]

    def sorted_entries(self) -> List[Entry]:
        return sorted(self.entries.values(), key=lambda e: (e.data_offset, e.xxhash))


def _read_signature(br: BinaryReader, layout: WadLayout) -> bytes:
    if layout.signature_rule == SIG_FIXED:
        return br.read_bytes(layout.signature_size)
    if layout.signature_rule == SIG_LENGTH_PREFIXED:
        length = br.read_u8()
        if length > layout.signature_size:
            raise InvalidSignatureLength(length)
        return br.read_bytes(layout.signature_size - length)
    return b""


def read_wad(f: BinaryIO) -> Wad:
    """Decode a WAD header and its entry directory from a binary file object.

    The stream must be positioned at the start of the archive. Payload bytes
    are never read.

    Raises:
        InvalidSignature: magic is not "RW".
        UnsupportedVersion: major version above 3.
        InvalidSignatureLength: v2 signature length byte above 83.
        UnknownEntryDataFormat: an entry carries an unknown format byte.
        DuplicateEntry: two entries share a path hash.
        EOFError: the stream ends inside the header or directory.
        OSError: the underlying read failed.
    """
    br = BinaryReader(f)

    magic = br.read_string(2)
    if magic != WAD_MAGIC:
        raise InvalidSignature(magic)

    major = br.read_u8()
    minor = br.read_u8()
    layout = layout_for(major, minor)

    signature = _read_signature(br, layout)

    br.read_u64()  # reserved

    if layout.has_legacy_toc:
        br.read_u16()  # toc start offset
        br.read_u16()  # toc entry size

    entry_count = br.read_u32()
    entries: Dict[int, Entry] = {}
    for _ in range(entry_count):
        entry = read_entry(br, major, minor)
        if entry.xxhash in entries:
            raise DuplicateEntry(entry.xxhash)
        entries[entry.xxhash] = entry

    return Wad(
        version_major=major,
        version_minor=minor,
        signature=signature,
        entries=MappingProxyType(entries),
    )
