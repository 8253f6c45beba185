from __future__ import annotations

import struct
from typing import BinaryIO


_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_U64 = struct.Struct("<Q")


def read_exact(f: BinaryIO, n: int) -> bytes:
    b = f.read(n)
    if len(b) != n:
        raise EOFError("Unexpected EOF")
    return b


class BinaryReader:
    """Little-endian primitive reads over a seekable binary file object.

    Short reads raise EOFError; errors from the underlying file (OSError)
    are not caught here.
    """

    def __init__(self, f: BinaryIO):
        self.f = f

    def tell(self) -> int:
        return self.f.tell()

    def seek(self, offset: int) -> None:
        self.f.seek(offset)

    def read_bytes(self, n: int) -> bytes:
        return read_exact(self.f, n)

    def read_string(self, n: int) -> str:
        return read_exact(self.f, n).decode("utf-8", errors="replace")

    def _unpack(self, st: struct.Struct) -> int:
        (value,) = st.unpack(read_exact(self.f, st.size))
        return value

    def read_u8(self) -> int:
        return self._unpack(_U8)

    def read_u16(self) -> int:
        return self._unpack(_U16)

    def read_u32(self) -> int:
        return self._unpack(_U32)

    def read_i32(self) -> int:
        return self._unpack(_I32)

    def read_u64(self) -> int:
        return self._unpack(_U64)
