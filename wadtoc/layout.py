from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    CHECKSUM_SIZE,
    ENTRY_BASE_SIZE,
    MAX_VERSION_MAJOR,
    V2_SIGNATURE_AREA_SIZE,
    V3_SIGNATURE_SIZE,
    ChecksumKind,
)
from .errors import UnsupportedVersion


# Signature rules
SIG_NONE = 0
SIG_LENGTH_PREFIXED = 1  # one length byte L, then (83 - L) bytes
SIG_FIXED = 2


@dataclass(frozen=True)
class WadLayout:
    """Header and entry shape for one (major, minor) version pair."""

    major: int
    minor: int
    signature_rule: int
    signature_size: int  # fixed size for SIG_FIXED, area size for SIG_LENGTH_PREFIXED
    has_legacy_toc: bool
    checksum_kind: ChecksumKind

    @property
    def entry_size(self) -> int:
        if self.checksum_kind is ChecksumKind.NONE:
            return ENTRY_BASE_SIZE
        return ENTRY_BASE_SIZE + CHECKSUM_SIZE


def checksum_kind_for(major: int, minor: int) -> ChecksumKind:
    if major < 2:
        return ChecksumKind.NONE
    if major == 3 and minor == 1:
        return ChecksumKind.XXHASH3
    return ChecksumKind.SHA256


def layout_for(major: int, minor: int) -> WadLayout:
    """Return the layout descriptor for a header version.

    Raises:
        UnsupportedVersion: when major is newer than the last known generation.
    """
    if major > MAX_VERSION_MAJOR:
        raise UnsupportedVersion(major, minor)
    if major == 3:
        sig_rule, sig_size = SIG_FIXED, V3_SIGNATURE_SIZE
    elif major == 2:
        sig_rule, sig_size = SIG_LENGTH_PREFIXED, V2_SIGNATURE_AREA_SIZE
    else:
        sig_rule, sig_size = SIG_NONE, 0
    return WadLayout(
        major=major,
        minor=minor,
        signature_rule=sig_rule,
        signature_size=sig_size,
        has_legacy_toc=major in (1, 2),
        checksum_kind=checksum_kind_for(major, minor),
    )
