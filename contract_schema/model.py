"""
Immutable data model for decoded contract schemas.

Shape:
- `Module`: contract name -> `Contract`.
- `Contract`: optional state type, optional init parameter type, and a
  mapping of receive (entry point) names to parameter types.
- `Type`: closed union of one dataclass per variant family; every variant
  exposes `tag` (a `TypeTag`) so callers can dispatch on a single field.
- `Fields`: shape of struct / enum-variant members (named, unnamed, none).

Sequences are stored as tuples so a decoded tree is a plain value: equal
trees compare equal and nothing is shared between parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Dict, FrozenSet, Optional, Tuple, Union


class SizeLength(IntEnum):
    """Width of the length prefix used by runtime values of a collection type."""

    U8 = 0
    U16 = 1
    U32 = 2
    U64 = 3

    @property
    def width(self) -> int:
        """Prefix width in bytes (1, 2, 4 or 8)."""
        return 1 << int(self)


# A decoded size-length byte: `SizeLength` for 0..3, otherwise the raw byte as read.
SizeLengthValue = Union[SizeLength, int]


class TypeTag(IntEnum):
    UNIT = 0
    BOOL = 1
    U8 = 2
    U16 = 3
    U32 = 4
    U64 = 5
    I8 = 6
    I16 = 7
    I32 = 8
    I64 = 9
    # Token amount in micro units.
    AMOUNT = 10
    ACCOUNT_ADDRESS = 11
    # Contract instance address (index, subindex).
    CONTRACT_ADDRESS = 12
    # Milliseconds since the UNIX epoch.
    TIMESTAMP = 13
    # Milliseconds.
    DURATION = 14
    PAIR = 15
    LIST = 16
    SET = 17
    MAP = 18
    ARRAY = 19
    STRUCT = 20
    ENUM = 21
    STRING = 22
    U128 = 23
    I128 = 24
    CONTRACT_NAME = 25
    RECEIVE_NAME = 26


SCALAR_TAGS: FrozenSet[TypeTag] = frozenset(
    {
        TypeTag.UNIT,
        TypeTag.BOOL,
        TypeTag.U8,
        TypeTag.U16,
        TypeTag.U32,
        TypeTag.U64,
        TypeTag.U128,
        TypeTag.I8,
        TypeTag.I16,
        TypeTag.I32,
        TypeTag.I64,
        TypeTag.I128,
        TypeTag.AMOUNT,
        TypeTag.ACCOUNT_ADDRESS,
        TypeTag.CONTRACT_ADDRESS,
        TypeTag.TIMESTAMP,
        TypeTag.DURATION,
    }
)

STRING_TAGS: FrozenSet[TypeTag] = frozenset({TypeTag.STRING, TypeTag.CONTRACT_NAME, TypeTag.RECEIVE_NAME})


class FieldsTag(IntEnum):
    NAMED = 0
    UNNAMED = 1
    NONE = 2


@dataclass(frozen=True)
class ScalarType:
    """A payload-free leaf (integers, bool, unit, amounts, addresses, time)."""

    tag: TypeTag

    def __post_init__(self) -> None:
        if self.tag not in SCALAR_TAGS:
            raise ValueError(f"{self.tag!r} is not a scalar type tag")


@dataclass(frozen=True)
class PairType:
    of_left: "Type"
    of_right: "Type"

    tag: ClassVar[TypeTag] = TypeTag.PAIR


@dataclass(frozen=True)
class ListType:
    size_length: SizeLengthValue
    of: "Type"

    tag: ClassVar[TypeTag] = TypeTag.LIST


@dataclass(frozen=True)
class SetType:
    size_length: SizeLengthValue
    of: "Type"

    tag: ClassVar[TypeTag] = TypeTag.SET


@dataclass(frozen=True)
class MapType:
    size_length: SizeLengthValue
    of_keys: "Type"
    of_values: "Type"

    tag: ClassVar[TypeTag] = TypeTag.MAP


@dataclass(frozen=True)
class ArrayType:
    """Fixed-size array; `size` is the element count (u32)."""

    size: int
    of: "Type"

    tag: ClassVar[TypeTag] = TypeTag.ARRAY


@dataclass(frozen=True)
class StructType:
    fields: "Fields"

    tag: ClassVar[TypeTag] = TypeTag.STRUCT


@dataclass(frozen=True)
class EnumType:
    """
    Enum with ordered `(variant name, fields)` pairs.

    Order matters: a runtime discriminant `i` selects `variants[i]`.
    """

    variants: Tuple[Tuple[str, "Fields"], ...]

    tag: ClassVar[TypeTag] = TypeTag.ENUM


@dataclass(frozen=True)
class StringType:
    """
    String, contract name or receive name.

    `size_length` is kept as decoded. It is expected to be `SizeLength.U32`
    but is not checked, and may be a raw byte outside the enumeration.
    """

    tag: TypeTag
    size_length: SizeLengthValue

    def __post_init__(self) -> None:
        if self.tag not in STRING_TAGS:
            raise ValueError(f"{self.tag!r} is not a string-like type tag")


Type = Union[
    ScalarType,
    PairType,
    ListType,
    SetType,
    MapType,
    ArrayType,
    StructType,
    EnumType,
    StringType,
]


@dataclass(frozen=True)
class NamedFields:
    """Named members, e.g. `struct Rgb { r: u8, g: u8, b: u8 }`."""

    contents: Tuple[Tuple[str, Type], ...]

    tag: ClassVar[FieldsTag] = FieldsTag.NAMED


@dataclass(frozen=True)
class UnnamedFields:
    """Positional members, e.g. `struct Point(u32, u32)`."""

    contents: Tuple[Type, ...]

    tag: ClassVar[FieldsTag] = FieldsTag.UNNAMED


@dataclass(frozen=True)
class NoFields:
    """No members, e.g. `Cat` in `enum Animal { Cat, Dog }`."""

    tag: ClassVar[FieldsTag] = FieldsTag.NONE


Fields = Union[NamedFields, UnnamedFields, NoFields]


@dataclass(frozen=True)
class Contract:
    state: Optional[Type] = None
    init: Optional[Type] = None
    receive: Dict[str, Type] = field(default_factory=dict)


Module = Dict[str, Contract]
