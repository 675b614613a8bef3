import asyncio

import pytest

from contract_schema.errors import UnexpectedEndOfInputError
from contract_schema.reader import (
    BytesSource,
    ByteReader,
    FileSource,
    IterableSource,
    QueueSource,
    StreamReaderSource,
)


@pytest.mark.asyncio
async def test_read_exact_is_chunk_boundary_independent():
    payload = bytes(range(40))
    whole = ByteReader(BytesSource(payload))
    split = ByteReader(BytesSource(payload, chunk_size=1))
    assert await whole.read_exact(37) == await split.read_exact(37)
    assert split.position == 37


@pytest.mark.asyncio
async def test_read_exact_spans_deliveries_and_skips_empty_ones():
    reader = ByteReader(IterableSource([b"", b"ab", b"", b"c", b"def"]))
    assert await reader.read_exact(4) == b"abcd"
    assert reader.buffered == 2
    assert await reader.read_exact(2) == b"ef"
    assert await reader.at_eof()


@pytest.mark.asyncio
async def test_unexpected_end_of_input_reports_counts():
    reader = ByteReader(BytesSource(b"\x01\x02\x03", chunk_size=2))
    assert await reader.read_exact(1) == b"\x01"
    with pytest.raises(UnexpectedEndOfInputError) as err:
        await reader.read_exact(4)
    assert err.value.requested == 4
    assert err.value.available == 2
    assert err.value.offset == 1


@pytest.mark.asyncio
async def test_empty_source_fails_on_first_byte():
    reader = ByteReader(BytesSource(b""))
    with pytest.raises(UnexpectedEndOfInputError):
        await reader.read_exact(1)


@pytest.mark.asyncio
async def test_zero_and_negative_reads():
    reader = ByteReader(IterableSource([]))
    assert await reader.read_exact(0) == b""
    with pytest.raises(ValueError):
        await reader.read_exact(-1)


@pytest.mark.asyncio
async def test_reader_suspends_until_producer_delivers():
    source = QueueSource()
    reader = ByteReader(source)
    task = asyncio.ensure_future(reader.read_exact(4))

    source.feed(b"\x01\x02")
    for _ in range(5):
        await asyncio.sleep(0)
    assert not task.done()

    source.feed(b"\x03\x04")
    assert await asyncio.wait_for(task, timeout=1) == b"\x01\x02\x03\x04"


@pytest.mark.asyncio
async def test_queue_source_close_ends_input():
    source = QueueSource()
    reader = ByteReader(source)
    source.feed(b"\x07")
    source.close()
    with pytest.raises(UnexpectedEndOfInputError):
        await reader.read_exact(2)
    assert await source.read_chunk() is None


@pytest.mark.asyncio
async def test_async_iterable_source():
    async def chunks():
        for piece in (b"sch", b"", b"ema"):
            await asyncio.sleep(0)
            yield piece

    reader = ByteReader(IterableSource(chunks()))
    assert await reader.read_exact(6) == b"schema"
    assert await reader.at_eof()


@pytest.mark.asyncio
async def test_stream_reader_source():
    stream = asyncio.StreamReader()
    stream.feed_data(b"\xff\x00")
    stream.feed_data(b"\x10")
    stream.feed_eof()
    reader = ByteReader(StreamReaderSource(stream, chunk_size=1))
    assert await reader.read_exact(3) == b"\xff\x00\x10"
    assert await reader.at_eof()


@pytest.mark.asyncio
async def test_at_eof_keeps_pending_bytes():
    reader = ByteReader(BytesSource(b"\x05\x06"))
    assert not await reader.at_eof()
    assert await reader.read_exact(2) == b"\x05\x06"
    assert await reader.at_eof()


def test_bytes_source_rejects_non_positive_chunk_size():
    with pytest.raises(ValueError):
        BytesSource(b"abc", chunk_size=0)


@pytest.mark.asyncio
async def test_file_source_streams_in_chunks(tmp_path):
    path = tmp_path / "schema.bin"
    path.write_bytes(bytes(range(10)))
    with path.open("rb") as fh:
        reader = ByteReader(FileSource(fh, chunk_size=3))
        assert await reader.read_exact(4) == bytes(range(4))
        assert reader.buffered == 2
        assert await reader.read_exact(6) == bytes(range(4, 10))
        assert await reader.at_eof()
