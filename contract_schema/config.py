"""
Environment-driven defaults.

Values are read once at import time. Malformed values fall back to the
built-in defaults rather than failing the import.
"""

from __future__ import annotations

import os

DEFAULT_MAX_DEPTH = 100
DEFAULT_CHUNK_SIZE = 64 * 1024


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Upper bound on nested `Type` levels accepted by the grammar decoder.
MAX_DEPTH = _env_int("CONTRACT_SCHEMA_MAX_DEPTH", DEFAULT_MAX_DEPTH)
# Delivery size used when feeding files and streams into a `ByteReader`.
CHUNK_SIZE = _env_int("CONTRACT_SCHEMA_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)
