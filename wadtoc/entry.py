from __future__ import annotations

from dataclasses import dataclass

from .binreader import BinaryReader
from .constants import CHECKSUM_SIZE, ChecksumKind, EntryDataFormat
from .errors import UnknownEntryDataFormat
from .layout import checksum_kind_for


@dataclass(frozen=True)
class EntryDataChecksum:
    kind: ChecksumKind
    value: bytes = b""

    def hex(self) -> str:
        return self.value.hex()


NO_CHECKSUM = EntryDataChecksum(ChecksumKind.NONE)


@dataclass(frozen=True)
class Entry:
    xxhash: int
    data_offset: int
    compressed_size: int
    uncompressed_size: int
    data_format: EntryDataFormat
    data_checksum: EntryDataChecksum
    is_duplicated: bool

    @property
    def has_checksum(self) -> bool:
        return self.data_checksum.kind is not ChecksumKind.NONE


def parse_data_format(value: int) -> EntryDataFormat:
    try:
        return EntryDataFormat(value)
    except ValueError:
        raise UnknownEntryDataFormat(value) from None


def read_entry(br: BinaryReader, major: int, minor: int) -> Entry:
    """Read one directory entry at the reader's current position.

    The checksum block is absent before major version 2; from then on it is
    8 bytes, tagged XXHASH3 only for version 3.1.
    """
    xxhash = br.read_u64()
    data_offset = br.read_u32()
    compressed_size = br.read_i32()
    uncompressed_size = br.read_i32()
    data_format = parse_data_format(br.read_u8())
    is_duplicated = br.read_u8() == 1
    br.read_u16()  # reserved

    kind = checksum_kind_for(major, minor)
    if kind is ChecksumKind.NONE:
        data_checksum = NO_CHECKSUM
    else:
        data_checksum = EntryDataChecksum(kind, br.read_bytes(CHECKSUM_SIZE))

    return Entry(
        xxhash=xxhash,
        data_offset=data_offset,
        compressed_size=compressed_size,
        uncompressed_size=uncompressed_size,
        data_format=data_format,
        data_checksum=data_checksum,
        is_duplicated=is_duplicated,
    )
