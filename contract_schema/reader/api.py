"""
Exact-length byte reads over chunked, possibly-suspending sources.

A *chunk source* is anything with an `async read_chunk()` coroutine:
- it returns a non-empty `bytes` when data is available,
- it returns `b""` when nothing has arrived yet (a zero-length delivery),
- it returns `None` once the input is closed and no more data will follow.

`ByteReader` sits on top of a source and turns those arbitrary-size
deliveries into exact reads. It keeps one accumulation buffer of bytes that
have been delivered but not yet handed to a caller; that buffer survives
suspension points, so a read of `n` bytes can be satisfied by any number of
deliveries of any size.
"""

from __future__ import annotations

import asyncio
from typing import IO, AsyncIterable, Iterable, Optional, Protocol, Union

from .. import config
from ..errors import UnexpectedEndOfInputError


class ChunkSource(Protocol):
    async def read_chunk(self) -> Optional[bytes]:
        ...


class ByteReader:
    """
    Pull exact byte counts from a `ChunkSource`.

    `position` is the number of bytes handed out so far; errors raised by the
    decoders report it as their offset.
    """

    def __init__(self, source: ChunkSource) -> None:
        self._source = source
        self._buffer = bytearray()
        self._closed = False
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def buffered(self) -> int:
        """Bytes delivered by the source but not yet consumed."""
        return len(self._buffer)

    async def _fill(self) -> bool:
        """Take one delivery from the source. Returns False once the source is closed."""
        if self._closed:
            return False
        chunk = await self._source.read_chunk()
        if chunk is None:
            self._closed = True
            return False
        if chunk:
            self._buffer += chunk
        else:
            # Nothing yet: let other tasks run before asking again.
            await asyncio.sleep(0)
        return True

    async def read_exact(self, n: int) -> bytes:
        """Return exactly `n` bytes, raising `UnexpectedEndOfInputError` if the source closes first."""
        if n < 0:
            raise ValueError(f"cannot read a negative number of bytes ({n})")
        while len(self._buffer) < n:
            if not await self._fill():
                raise UnexpectedEndOfInputError(n, len(self._buffer), self._position)
        out = bytes(self._buffer[:n])
        del self._buffer[:n]
        self._position += n
        return out

    async def at_eof(self) -> bool:
        """True when the source is closed and nothing remains buffered."""
        while not self._buffer:
            if not await self._fill():
                return True
        return False


class BytesSource:
    """In-memory source, optionally split into fixed-size deliveries."""

    def __init__(self, data: bytes, chunk_size: Optional[int] = None) -> None:
        if chunk_size is not None and chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive (got {chunk_size})")
        self._data = bytes(data)
        self._chunk_size = chunk_size
        self._offset = 0

    async def read_chunk(self) -> Optional[bytes]:
        if self._offset >= len(self._data):
            return None
        end = len(self._data) if self._chunk_size is None else self._offset + self._chunk_size
        chunk = self._data[self._offset : end]
        self._offset += len(chunk)
        return chunk


class IterableSource:
    """
    Source over a sync or async iterable of chunks.

    Each item is one delivery (empty items are zero-length deliveries);
    exhausting the iterable closes the source.
    """

    def __init__(self, chunks: Union[Iterable[bytes], AsyncIterable[bytes]]) -> None:
        if hasattr(chunks, "__aiter__"):
            self._aiter = chunks.__aiter__()  # type: ignore[union-attr]
            self._iter = None
        else:
            self._aiter = None
            self._iter = iter(chunks)  # type: ignore[arg-type]

    async def read_chunk(self) -> Optional[bytes]:
        if self._aiter is not None:
            try:
                return bytes(await self._aiter.__anext__())
            except StopAsyncIteration:
                return None
        try:
            return bytes(next(self._iter))  # type: ignore[arg-type]
        except StopIteration:
            return None


class QueueSource:
    """
    Producer/consumer source backed by an `asyncio.Queue`.

    Producers call `feed()` with chunks and `close()` when done (or put `None`
    on the queue directly). The reader suspends on the queue while it is empty.
    """

    def __init__(self, queue: Optional["asyncio.Queue[Optional[bytes]]"] = None) -> None:
        self.queue: "asyncio.Queue[Optional[bytes]]" = queue if queue is not None else asyncio.Queue()
        self._closed = False

    def feed(self, chunk: bytes) -> None:
        self.queue.put_nowait(bytes(chunk))

    def close(self) -> None:
        self.queue.put_nowait(None)

    async def read_chunk(self) -> Optional[bytes]:
        if self._closed:
            return None
        item = await self.queue.get()
        if item is None:
            self._closed = True
        return item


class StreamReaderSource:
    """Adapter for `asyncio.StreamReader` (an empty read means EOF there)."""

    def __init__(self, stream: asyncio.StreamReader, chunk_size: int = config.CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = chunk_size

    async def read_chunk(self) -> Optional[bytes]:
        data = await self._stream.read(self._chunk_size)
        return data or None


class FileSource:
    """
    Source over a binary file object, read in `chunk_size` deliveries.

    Reads run in a worker thread so a slow file does not stall the event loop.
    """

    def __init__(self, fh: IO[bytes], chunk_size: int = config.CHUNK_SIZE) -> None:
        self._fh = fh
        self._chunk_size = chunk_size

    async def read_chunk(self) -> Optional[bytes]:
        data = await asyncio.to_thread(self._fh.read, self._chunk_size)
        return data or None
