"""
Recursive decoder for the contract schema grammar.

Layout (all integers little-endian):
- module   := mapping_of(string, contract)
- contract := optional_of(type) state, optional_of(type) init,
              mapping_of(string, type) receive
- type     := u8 tag, then a per-tag payload (see `decode_type`)
- fields   := u8 tag, then named / unnamed members or nothing

Each call is a fresh descent over one `ByteReader`: there is no lookahead
beyond the current tag byte and no partial result on failure. Nesting is
bounded by `DecodeOptions.max_depth`; input that nests deeper fails with
`SchemaTooDeepError` instead of exhausting the interpreter stack.

The async functions are the primary surface. `decode_module_bytes`,
`decode_type_bytes` and `load_module` wrap them with `asyncio.run` for
callers holding a complete buffer or file; they cannot be used from inside a
running event loop.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from functools import lru_cache, partial
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar, Union

from .. import config
from ..combinators import (
    Decoder,
    mapping_of,
    optional_of,
    pair_of,
    sequence_of,
    u8,
    u32,
    utf8_string_fn,
)
from ..errors import (
    SchemaTooDeepError,
    TrailingBytesError,
    UnsupportedFieldsTagError,
    UnsupportedTypeTagError,
)
from ..model import (
    SCALAR_TAGS,
    STRING_TAGS,
    ArrayType,
    Contract,
    EnumType,
    Fields,
    FieldsTag,
    ListType,
    MapType,
    Module,
    NamedFields,
    NoFields,
    PairType,
    ScalarType,
    SetType,
    SizeLength,
    SizeLengthValue,
    StringType,
    StructType,
    Type,
    TypeTag,
    UnnamedFields,
)
from ..reader import BytesSource, ByteReader, ChunkSource, FileSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DecodeOptions:
    """
    Knobs for one decode pass.

    - `max_depth`: maximum number of nested `Type` levels (the outermost type
      of a state/init/receive slot is level 1).
    - `text_errors`: codec error handler for names; `"strict"` raises
      `MalformedTextError`, `"replace"` substitutes U+FFFD.
    """

    max_depth: int = config.MAX_DEPTH
    text_errors: str = "strict"


DEFAULT_OPTIONS = DecodeOptions()

_SIZE_LENGTHS = frozenset(int(s) for s in SizeLength)


@lru_cache(maxsize=None)
def _text(errors: str) -> Decoder[str]:
    return utf8_string_fn(errors)


async def decode_size_length(reader: ByteReader) -> SizeLengthValue:
    """
    Read a size-length byte.

    The value only describes how runtime values are prefixed, so bytes
    outside the enumeration are kept as plain ints rather than rejected.
    """
    value = await u8(reader)
    if value in _SIZE_LENGTHS:
        return SizeLength(value)
    return value


async def decode_type(reader: ByteReader, options: DecodeOptions = DEFAULT_OPTIONS, depth: int = 0) -> Type:
    """
    Decode one `Type` node (and, recursively, everything nested in it).

    `depth` is the number of enclosing `Type` levels.
    """
    if depth >= options.max_depth:
        raise SchemaTooDeepError(options.max_depth, reader.position)
    tag = await u8(reader)
    nested = partial(decode_type, options=options, depth=depth + 1)

    if tag in SCALAR_TAGS:
        return ScalarType(TypeTag(tag))
    if tag == TypeTag.PAIR:
        left = await nested(reader)
        right = await nested(reader)
        return PairType(of_left=left, of_right=right)
    if tag == TypeTag.LIST or tag == TypeTag.SET:
        size_length = await decode_size_length(reader)
        of = await nested(reader)
        if tag == TypeTag.LIST:
            return ListType(size_length=size_length, of=of)
        return SetType(size_length=size_length, of=of)
    if tag == TypeTag.MAP:
        size_length = await decode_size_length(reader)
        keys = await nested(reader)
        values = await nested(reader)
        return MapType(size_length=size_length, of_keys=keys, of_values=values)
    if tag == TypeTag.ARRAY:
        size = await u32(reader)
        of = await nested(reader)
        return ArrayType(size=size, of=of)
    if tag == TypeTag.STRUCT:
        fields = await decode_fields(reader, options, depth + 1)
        return StructType(fields=fields)
    if tag == TypeTag.ENUM:
        fields_decoder = partial(decode_fields, options=options, depth=depth + 1)
        variants = await sequence_of(pair_of(_text(options.text_errors), fields_decoder))(reader)
        return EnumType(variants=variants)
    if tag in STRING_TAGS:
        # Expected to be SizeLength.U32; kept as decoded without checking.
        size_length = await decode_size_length(reader)
        return StringType(tag=TypeTag(tag), size_length=size_length)
    raise UnsupportedTypeTagError(tag, reader.position - 1)


async def decode_fields(reader: ByteReader, options: DecodeOptions = DEFAULT_OPTIONS, depth: int = 0) -> Fields:
    """Decode struct / enum-variant members; member types sit at `depth`."""
    tag = await u8(reader)
    member = partial(decode_type, options=options, depth=depth)
    if tag == FieldsTag.NAMED:
        contents = await sequence_of(pair_of(_text(options.text_errors), member))(reader)
        return NamedFields(contents=contents)
    if tag == FieldsTag.UNNAMED:
        return UnnamedFields(contents=await sequence_of(member)(reader))
    if tag == FieldsTag.NONE:
        return NoFields()
    raise UnsupportedFieldsTagError(tag, reader.position - 1)


async def decode_contract(reader: ByteReader, options: DecodeOptions = DEFAULT_OPTIONS) -> Contract:
    """Decode state, init and receive, in that order."""
    top = partial(decode_type, options=options, depth=0)
    state = await optional_of(top)(reader)
    init = await optional_of(top)(reader)
    receive = await mapping_of(_text(options.text_errors), top)(reader)
    return Contract(state=state, init=init, receive=receive)


async def decode_module(reader: ByteReader, options: DecodeOptions = DEFAULT_OPTIONS) -> Module:
    """Decode a full module: contract name -> contract."""
    start = reader.position
    logger.debug("decoding module at offset %d", start)
    contracts = mapping_of(_text(options.text_errors), partial(decode_contract, options=options))
    module = await contracts(reader)
    logger.debug("decoded %d contract(s) from %d bytes", len(module), reader.position - start)
    return module


async def _finish(reader: ByteReader, strict: bool) -> None:
    if strict and not await reader.at_eof():
        raise TrailingBytesError(reader.buffered, reader.position)


async def decode_module_from_source(
    source: ChunkSource,
    options: Optional[DecodeOptions] = None,
    strict: bool = False,
) -> Module:
    """Decode a module from any chunk source; `strict` rejects trailing bytes."""
    return await _decode_all(decode_module, source, options or DEFAULT_OPTIONS, strict)


async def _decode_all(
    decode: Callable[[ByteReader, DecodeOptions], Awaitable[T]],
    source: ChunkSource,
    options: DecodeOptions,
    strict: bool,
) -> T:
    reader = ByteReader(source)
    value = await decode(reader, options)
    await _finish(reader, strict)
    return value


def decode_module_bytes(
    data: bytes,
    options: Optional[DecodeOptions] = None,
    chunk_size: Optional[int] = None,
    strict: bool = False,
) -> Module:
    """Synchronously decode a complete module buffer."""
    source = BytesSource(data, chunk_size=chunk_size)
    return asyncio.run(_decode_all(decode_module, source, options or DEFAULT_OPTIONS, strict))


def decode_type_bytes(
    data: bytes,
    options: Optional[DecodeOptions] = None,
    strict: bool = False,
) -> Type:
    """Synchronously decode a single `Type` from a buffer."""
    return asyncio.run(_decode_all(decode_type, BytesSource(data), options or DEFAULT_OPTIONS, strict))


def load_module(
    path: Union[str, Path],
    options: Optional[DecodeOptions] = None,
    chunk_size: int = config.CHUNK_SIZE,
    strict: bool = False,
) -> Module:
    """Decode a module from a schema file, streaming it in `chunk_size` deliveries."""
    path = Path(path)
    with path.open("rb") as fh:
        source = FileSource(fh, chunk_size=chunk_size)
        module = asyncio.run(_decode_all(decode_module, source, options or DEFAULT_OPTIONS, strict))
    logger.debug("loaded %s: %d contract(s)", path, len(module))
    return module
