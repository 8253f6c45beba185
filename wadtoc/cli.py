from __future__ import annotations

import argparse
import json as _json
import sys
from collections import Counter
from typing import Any, Dict, List, Optional

from wadtoc.constants import EntryDataFormat
from wadtoc.entry import Entry
from wadtoc.errors import WadError
from wadtoc.wad import Wad


def _format_name(fmt: EntryDataFormat) -> str:
    return fmt.name.lower().replace("_", "-")


_FORMAT_NAMES = {_format_name(f): f for f in EntryDataFormat}


def _parse_hash(text: str) -> int:
    """Parse a path hash given as hex (16 digits or 0x-prefixed) or decimal.

    Raises:
        ValueError: if the text is not a valid unsigned 64-bit value.
    """
    s = text.strip().lower()
    if s.startswith("0x"):
        value = int(s[2:], 16)
    elif len(s) == 16 or any(c in "abcdef" for c in s):
        value = int(s, 16)
    else:
        value = int(s, 10)
    if not 0 <= value < 1 << 64:
        raise ValueError(f"hash out of range: {text}")
    return value


def _entry_dict(e: Entry) -> Dict[str, Any]:
    return {
        "hash": f"{e.xxhash:016x}",
        "offset": e.data_offset,
        "compressed_size": e.compressed_size,
        "uncompressed_size": e.uncompressed_size,
        "format": _format_name(e.data_format),
        "duplicated": e.is_duplicated,
        "checksum_kind": e.data_checksum.kind.value,
        "checksum": e.data_checksum.hex() if e.has_checksum else None,
    }


def _entry_line(e: Entry) -> str:
    checksum = f"{e.data_checksum.kind.value}:{e.data_checksum.hex()}" if e.has_checksum else "-"
    dup = "\tdup" if e.is_duplicated else ""
    return (
        f"{e.xxhash:016x}\t{e.data_offset}\t{e.compressed_size}\t{e.uncompressed_size}"
        f"\t{_format_name(e.data_format)}\t{checksum}{dup}"
    )


def cmd_info(archive: str) -> bool:
    """Show header information and entry statistics.

    Args:
        archive: Path to a WAD file.
    """
    wad = Wad.mount_from_path(archive)
    formats = Counter(e.data_format for e in wad.entries.values())
    print(f"Archive: {archive}")
    print(f"  Version: {wad.version_major}.{wad.version_minor}")
    print(f"  Signature: {len(wad.signature)} bytes")
    print(f"  Entries: {len(wad)}")
    for fmt in EntryDataFormat:
        if formats[fmt]:
            print(f"    {_format_name(fmt)}: {formats[fmt]}")
    print(f"  Duplicated: {sum(1 for e in wad.entries.values() if e.is_duplicated)}")
    return True


def cmd_list(archive: str, *, as_json: bool = False, data_format: Optional[str] = None) -> bool:
    """List directory entries ordered by data offset.

    Args:
        archive: Path to a WAD file.
        as_json: Emit a JSON array instead of tab-separated lines.
        data_format: Only list entries with this format name (e.g. "zstd").
    """
    wad = Wad.mount_from_path(archive)
    entries: List[Entry] = wad.sorted_entries()
    if data_format is not None:
        wanted = _FORMAT_NAMES[data_format]
        entries = [e for e in entries if e.data_format is wanted]
    if as_json:
        print(_json.dumps([_entry_dict(e) for e in entries], indent=2))
    else:
        for e in entries:
            print(_entry_line(e))
    return True


def cmd_show(archive: str, xxhash: int) -> bool:
    """Print one entry by path hash.

    Returns:
        False when no entry has that hash.
    """
    wad = Wad.mount_from_path(archive)
    e = wad.get(xxhash)
    if e is None:
        print(f"No entry with hash {xxhash:016x}", file=sys.stderr)
        return False
    for k, v in _entry_dict(e).items():
        print(f"{k}: {v}")
    return True


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="wadtoc",
        description="Inspect the table of contents of RW WAD archives",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_info = sub.add_parser("info", help="Show archive header information")
    ap_info.add_argument("archive", help="Archive path")

    ap_list = sub.add_parser("list", help="List archive entries")
    ap_list.add_argument("archive", help="Archive path")
    ap_list.add_argument("--json", action="store_true", help="Emit JSON")
    ap_list.add_argument("--format", choices=sorted(_FORMAT_NAMES), help="Only list entries with this data format")

    ap_show = sub.add_parser("show", help="Show one entry by path hash")
    ap_show.add_argument("archive", help="Archive path")
    ap_show.add_argument("hash", help="Path hash (hex or decimal)")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "info":
            cmd_info(args.archive)
        elif args.cmd == "list":
            cmd_list(args.archive, as_json=args.json, data_format=args.format)
        elif args.cmd == "show":
            try:
                xxhash = _parse_hash(args.hash)
            except ValueError as e:
                print(f"Error: invalid hash: {e}", file=sys.stderr)
                sys.exit(2)
            if not cmd_show(args.archive, xxhash):
                sys.exit(1)
        else:
            raise RuntimeError("Unknown command")
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except EOFError:
        print("Error: archive is truncated", file=sys.stderr)
        sys.exit(2)
    except (WadError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
