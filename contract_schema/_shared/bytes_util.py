"""
Small byte helpers shared across schema modules.

These operate on complete in-memory buffers. Streaming reads go through
`contract_schema.reader.ByteReader`, which hands its exact-length results to
these helpers.
"""

from __future__ import annotations


def u8(buf: bytes, off: int = 0) -> int:
    """Read an unsigned byte at offset `off`."""
    return buf[off]


def u32le(buf: bytes, off: int = 0) -> int:
    """Read a little-endian u32 at byte offset `off`."""
    return int.from_bytes(buf[off : off + 4], "little")


def hex_preview(blob: bytes, count: int = 32) -> str:
    """
    Render the first few bytes of a schema blob for logs and error messages.

    Bytes are grouped in runs of eight so offsets are easy to count by eye.
    """
    preview = blob[:count]
    grouped = ["".join(f"{b:02x}" for b in preview[i : i + 8]) for i in range(0, len(preview), 8)]
    suffix = " ..." if len(blob) > count else ""
    return " ".join(grouped) + suffix
