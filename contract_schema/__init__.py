"""
Decoder for binary smart-contract schemas.

A schema describes, per contract, the types of its persisted state and of
the parameters of its init function and receive entry points, using a small
recursive type grammar (scalars, pairs, collections, arrays, structs, enums,
strings).

Subpackages (functional groups):
- `reader`: exact-length reads over chunked, possibly-suspending sources.
- `combinators`: `u8`/`u32` and the generic sequence/mapping/option/pair/string
  decoders.
- `decoder`: the grammar decoder (`decode_module`, `decode_type`, ...).
- `inspect`: JSON conversion, type rendering and summaries.

Preferred imports:
- `from contract_schema import decoder, reader, inspect`
- `from contract_schema import decode_module_bytes, load_module` for the
  common whole-buffer / whole-file cases.

Encoding schemas and parsing contract *values* are out of scope.
"""

from __future__ import annotations

from . import combinators as combinators  # noqa: F401
from . import decoder as decoder  # noqa: F401
from . import errors as errors  # noqa: F401
from . import inspect as inspect  # noqa: F401
from . import model as model  # noqa: F401
from . import reader as reader  # noqa: F401

# Small stable convenience surface.
from .decoder import DecodeOptions, decode_module, decode_module_bytes, decode_type, load_module  # noqa: F401
from .errors import SchemaDecodeError  # noqa: F401
from .model import Contract, Module, Type  # noqa: F401
from .reader import ByteReader  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    # modules
    "combinators",
    "decoder",
    "errors",
    "inspect",
    "model",
    "reader",
    # decoder
    "DecodeOptions",
    "decode_module",
    "decode_module_bytes",
    "decode_type",
    "load_module",
    # model
    "Contract",
    "Module",
    "Type",
    # reader / errors
    "ByteReader",
    "SchemaDecodeError",
    "__version__",
]
