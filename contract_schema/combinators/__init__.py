"""
Primitive decoders (`u8`, `u32`) and the generic combinator layer.

Public API:
- `u8`, `u32`
- `sequence_of`, `mapping_of`, `optional_of`, `pair_of`
- `utf8_string`, `utf8_string_fn`
- `Decoder` type alias and `OptionTag`
"""

from __future__ import annotations

from .api import (  # noqa: F401
    Decoder,
    OptionTag,
    mapping_of,
    optional_of,
    pair_of,
    sequence_of,
    u8,
    u32,
    utf8_string,
    utf8_string_fn,
)

__all__ = [
    "Decoder",
    "OptionTag",
    "u8",
    "u32",
    "sequence_of",
    "mapping_of",
    "optional_of",
    "pair_of",
    "utf8_string",
    "utf8_string_fn",
]
