class WadError(Exception):
    """Base class for WAD decoding errors."""


# Header
class InvalidSignature(WadError):
    def __init__(self, magic: str):
        super().__init__(f"Invalid signature: {magic}")
        self.magic = magic


class UnsupportedVersion(WadError):
    def __init__(self, major: int, minor: int):
        super().__init__(f"Unsupported version: {major}.{minor}")
        self.major = major
        self.minor = minor


class InvalidSignatureLength(WadError):
    def __init__(self, length: int):
        super().__init__(f"Invalid signature length: {length}")
        self.length = length


# Directory
class UnknownEntryDataFormat(WadError):
    def __init__(self, value: int):
        super().__init__(f"Unknown entry data format: {value}")
        self.value = value


class DuplicateEntry(WadError):
    def __init__(self, xxhash: int):
        super().__init__(f"An entry with the same path hash already exists: {xxhash:016x}")
        self.xxhash = xxhash
