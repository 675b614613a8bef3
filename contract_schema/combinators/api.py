"""
Primitive decoders and generic read-combinators.

A decoder is an async callable taking a `ByteReader` and returning a value.
The combinators here build new decoders out of caller-supplied element
decoders, so the grammar decoder can be written as plain composition:

    entrypoints = mapping_of(utf8_string, decode_type)
    receive = await entrypoints(reader)

Wire conventions:
- integers are little-endian,
- sequences and mappings carry a u32 element count,
- optionals carry a one-byte tag (0 = absent, 1 = present),
- pairs are the two values back to back.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar

from .._shared import bytes_util
from ..errors import MalformedTextError, UnsupportedOptionTagError
from ..reader import ByteReader

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
L = TypeVar("L")
R = TypeVar("R")

Decoder = Callable[[ByteReader], Awaitable[T]]


class OptionTag(IntEnum):
    NONE = 0
    SOME = 1


async def u8(reader: ByteReader) -> int:
    """Read one byte as an unsigned integer (0..255)."""
    return bytes_util.u8(await reader.read_exact(1))


async def u32(reader: ByteReader) -> int:
    """Read a little-endian unsigned 32-bit integer."""
    return bytes_util.u32le(await reader.read_exact(4))


def sequence_of(decode_elem: Decoder[T]) -> Decoder[Tuple[T, ...]]:
    """u32 count followed by that many elements, in order."""

    async def decode(reader: ByteReader) -> Tuple[T, ...]:
        length = await u32(reader)
        items: List[T] = []
        for _ in range(length):
            items.append(await decode_elem(reader))
        return tuple(items)

    return decode


def mapping_of(decode_key: Decoder[K], decode_value: Decoder[V]) -> Decoder[Dict[K, V]]:
    """
    u32 count followed by that many key/value pairs.

    Duplicate keys are not rejected: the last value read for a key wins.
    """

    async def decode(reader: ByteReader) -> Dict[K, V]:
        length = await u32(reader)
        out: Dict[K, V] = {}
        for _ in range(length):
            key = await decode_key(reader)
            out[key] = await decode_value(reader)
        return out

    return decode


def optional_of(decode_inner: Decoder[T]) -> Decoder[Optional[T]]:
    """One-byte option tag, then the inner value when the tag is `SOME`."""

    async def decode(reader: ByteReader) -> Optional[T]:
        tag = await u8(reader)
        if tag == OptionTag.NONE:
            return None
        if tag == OptionTag.SOME:
            return await decode_inner(reader)
        raise UnsupportedOptionTagError(tag, reader.position - 1)

    return decode


def pair_of(decode_left: Decoder[L], decode_right: Decoder[R]) -> Decoder[Tuple[L, R]]:
    """Left value then right value, no prefix."""

    async def decode(reader: ByteReader) -> Tuple[L, R]:
        left = await decode_left(reader)
        right = await decode_right(reader)
        return left, right

    return decode


def utf8_string_fn(errors: str = "strict") -> Decoder[str]:
    """
    Build a string decoder: u32 byte count, then that many UTF-8 bytes.

    With `errors="strict"` malformed text raises `MalformedTextError`; any
    other codec error handler (e.g. `"replace"`) is passed to `bytes.decode`.
    """

    async def decode(reader: ByteReader) -> str:
        length = await u32(reader)
        start = reader.position
        raw = await reader.read_exact(length)
        try:
            return raw.decode("utf-8", errors=errors)
        except UnicodeDecodeError as exc:
            raise MalformedTextError(exc.reason, start + exc.start) from exc

    return decode


utf8_string = utf8_string_fn()
