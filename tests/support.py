"""
Byte builders for tests.

The library only decodes; these helpers produce the wire form of model
values so tests can describe inputs as types instead of raw byte lists.
"""

from __future__ import annotations

from contract_schema.model import (
    ArrayType,
    Contract,
    EnumType,
    ListType,
    MapType,
    NamedFields,
    NoFields,
    PairType,
    ScalarType,
    SetType,
    StringType,
    StructType,
    UnnamedFields,
)


def u32(n: int) -> bytes:
    return n.to_bytes(4, "little")


def text(s: str) -> bytes:
    raw = s.encode("utf-8")
    return u32(len(raw)) + raw


def encode_fields(f) -> bytes:
    if isinstance(f, NamedFields):
        return bytes([0]) + u32(len(f.contents)) + b"".join(text(n) + encode_type(t) for n, t in f.contents)
    if isinstance(f, UnnamedFields):
        return bytes([1]) + u32(len(f.contents)) + b"".join(encode_type(t) for t in f.contents)
    assert isinstance(f, NoFields)
    return bytes([2])


def encode_type(t) -> bytes:
    head = bytes([t.tag])
    if isinstance(t, ScalarType):
        return head
    if isinstance(t, PairType):
        return head + encode_type(t.of_left) + encode_type(t.of_right)
    if isinstance(t, (ListType, SetType)):
        return head + bytes([t.size_length]) + encode_type(t.of)
    if isinstance(t, MapType):
        return head + bytes([t.size_length]) + encode_type(t.of_keys) + encode_type(t.of_values)
    if isinstance(t, ArrayType):
        return head + u32(t.size) + encode_type(t.of)
    if isinstance(t, StructType):
        return head + encode_fields(t.fields)
    if isinstance(t, EnumType):
        return head + u32(len(t.variants)) + b"".join(text(n) + encode_fields(f) for n, f in t.variants)
    assert isinstance(t, StringType)
    return head + bytes([t.size_length])


def option(t) -> bytes:
    return b"\x00" if t is None else b"\x01" + encode_type(t)


def encode_contract(c: Contract) -> bytes:
    receive = u32(len(c.receive)) + b"".join(text(n) + encode_type(t) for n, t in c.receive.items())
    return option(c.state) + option(c.init) + receive


def encode_module(module) -> bytes:
    return u32(len(module)) + b"".join(text(n) + encode_contract(c) for n, c in module.items())
