"""
Grammar decoder for contract schemas.

Public API:
- async: `decode_type`, `decode_fields`, `decode_contract`, `decode_module`,
  `decode_module_from_source`, `decode_size_length`
- sync: `decode_module_bytes`, `decode_type_bytes`, `load_module`
- `DecodeOptions`, `DEFAULT_OPTIONS`
"""

from __future__ import annotations

from .api import (  # noqa: F401
    DEFAULT_OPTIONS,
    DecodeOptions,
    decode_contract,
    decode_fields,
    decode_module,
    decode_module_bytes,
    decode_module_from_source,
    decode_size_length,
    decode_type,
    decode_type_bytes,
    load_module,
)

__all__ = [
    "DecodeOptions",
    "DEFAULT_OPTIONS",
    "decode_type",
    "decode_fields",
    "decode_contract",
    "decode_module",
    "decode_module_from_source",
    "decode_size_length",
    "decode_module_bytes",
    "decode_type_bytes",
    "load_module",
]
