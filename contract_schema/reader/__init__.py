"""
Byte Reader: exact-length reads over chunked, possibly-suspending sources.

Public API:
- `ByteReader`
- `ChunkSource` protocol and the bundled sources (`BytesSource`,
  `IterableSource`, `QueueSource`, `StreamReaderSource`, `FileSource`).
"""

from __future__ import annotations

from .api import (  # noqa: F401
    BytesSource,
    ByteReader,
    ChunkSource,
    FileSource,
    IterableSource,
    QueueSource,
    StreamReaderSource,
)

__all__ = [
    "ByteReader",
    "ChunkSource",
    "BytesSource",
    "IterableSource",
    "QueueSource",
    "StreamReaderSource",
    "FileSource",
]
