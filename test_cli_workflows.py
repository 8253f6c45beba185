from __future__ import annotations

import json
import os
import struct
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from wadtoc.cli import _parse_hash


def _write_sample_wad(path: Path) -> None:
    entries = [
        # hash, offset, csize, usize, format, dup
        (0x00000000000000AA, 4096, 10, 20, 3, 0, b"\x01" * 8),
        (0x00000000000000BB, 1024, 30, 30, 0, 1, b"\x02" * 8),
        (0x00000000000000CC, 2048, 5, 40, 1, 0, b"\x03" * 8),
    ]
    out = b"RW\x03\x01" + b"\x00" * 256 + struct.pack("<Q", 0) + struct.pack("<I", len(entries))
    for h, off, cs, us, fmt, dup, checksum in entries:
        out += struct.pack("<QIiiBBH", h, off, cs, us, fmt, dup, 0) + checksum
    path.write_bytes(out)


class CLIIntegrationTests(unittest.TestCase):
    def run_cli(self, args, *, expect: int | None = 0):
        cmd = [sys.executable, "-m", "wadtoc.cli"] + list(args)
        env = os.environ.copy()
        repo_root = Path(__file__).resolve().parent
        existing = env.get("PYTHONPATH", "")
        env["PYTHONPATH"] = str(repo_root) if not existing else f"{repo_root}{os.pathsep}{existing}"
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            env=env,
        )
        if expect is not None and proc.returncode != expect:
            raise AssertionError(
                f"CLI exited {proc.returncode}, expected {expect}\nCommand: {' '.join(cmd)}\nSTDOUT:\n{proc.stdout}\nSTDERR:\n{proc.stderr}"
            )
        return proc

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.workspace = Path(tmp.name)
        self.archive = self.workspace / "sample.wad.client"
        _write_sample_wad(self.archive)

    def test_info(self):
        proc = self.run_cli(["info", str(self.archive)])
        self.assertIn("Version: 3.1", proc.stdout)
        self.assertIn("Signature: 256 bytes", proc.stdout)
        self.assertIn("Entries: 3", proc.stdout)
        self.assertIn("zstd: 1", proc.stdout)
        self.assertIn("Duplicated: 1", proc.stdout)

    def test_list_sorted_by_offset(self):
        proc = self.run_cli(["list", str(self.archive)])
        lines = proc.stdout.strip().splitlines()
        self.assertEqual([ln.split("\t")[0] for ln in lines], ["00000000000000bb", "00000000000000cc", "00000000000000aa"])
        self.assertIn("xxhash3:0101010101010101", lines[2])
        self.assertTrue(lines[0].endswith("\tdup"))

    def test_list_json_and_filter(self):
        proc = self.run_cli(["list", str(self.archive), "--json", "--format", "gzip"])
        data = json.loads(proc.stdout)
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["hash"], "00000000000000cc")
        self.assertEqual(data[0]["uncompressed_size"], 40)
        self.assertEqual(data[0]["checksum_kind"], "xxhash3")

    def test_show(self):
        proc = self.run_cli(["show", str(self.archive), "0xaa"])
        self.assertIn("offset: 4096", proc.stdout)
        missing = self.run_cli(["show", str(self.archive), "0x1234"], expect=1)
        self.assertIn("No entry", missing.stderr)
        bad = self.run_cli(["show", str(self.archive), "not-a-hash"], expect=2)
        self.assertIn("invalid hash", bad.stderr)

    def test_errors_exit_2(self):
        bad = self.workspace / "bad.wad"
        bad.write_bytes(b"RW\x05\x00")
        proc = self.run_cli(["info", str(bad)], expect=2)
        self.assertIn("Unsupported version: 5.0", proc.stderr)

        truncated = self.workspace / "short.wad"
        truncated.write_bytes(b"RW\x03\x01\x00")
        proc = self.run_cli(["list", str(truncated)], expect=2)
        self.assertIn("truncated", proc.stderr)

        proc = self.run_cli(["info", str(self.workspace / "missing.wad")], expect=2)
        self.assertIn("Error:", proc.stderr)


class ParseHashTests(unittest.TestCase):
    def test_forms(self):
        self.assertEqual(_parse_hash("0xFF"), 255)
        self.assertEqual(_parse_hash("00000000000000ff"), 255)
        self.assertEqual(_parse_hash("255"), 255)
        self.assertEqual(_parse_hash("ab"), 0xAB)
        with self.assertRaises(ValueError):
            _parse_hash("0x1" + "0" * 16)
        with self.assertRaises(ValueError):
            _parse_hash("xyz")


if __name__ == "__main__":
    unittest.main()
