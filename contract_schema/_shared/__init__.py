"""Low-level helpers shared across `contract_schema` modules."""

from __future__ import annotations

from .bytes_util import hex_preview, u8, u32le  # noqa: F401

__all__ = ["hex_preview", "u8", "u32le"]
