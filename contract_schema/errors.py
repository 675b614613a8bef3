"""
Error contract for schema decoding.

Every failure raised while decoding derives from `SchemaDecodeError` and
carries the reader offset (bytes consumed so far) at which it was detected.
Callers should treat any of these as "this schema is unusable"; the decoder
never returns a partial module.
"""

from __future__ import annotations

from typing import Optional


class SchemaDecodeError(Exception):
    """Base schema decoding error."""

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class UnexpectedEndOfInputError(SchemaDecodeError):
    """Raised when the source closes before an exact read can be satisfied."""

    def __init__(self, requested: int, available: int, offset: Optional[int] = None) -> None:
        super().__init__(
            f"unexpected end of input: needed {requested} bytes, only {available} available",
            offset,
        )
        self.requested = requested
        self.available = available


class UnsupportedTagError(SchemaDecodeError):
    """Raised when a tag byte falls outside its enumerated range."""

    kind = "tag"

    def __init__(self, tag: int, offset: Optional[int] = None) -> None:
        super().__init__(f"unsupported {self.kind}: {tag}", offset)
        self.tag = tag


class UnsupportedTypeTagError(UnsupportedTagError):
    kind = "type tag"


class UnsupportedFieldsTagError(UnsupportedTagError):
    kind = "fields tag"


class UnsupportedOptionTagError(UnsupportedTagError):
    kind = "option tag"


class MalformedTextError(SchemaDecodeError):
    """Raised when string bytes are not valid UTF-8 (strict text policy)."""

    def __init__(self, reason: str, offset: Optional[int] = None) -> None:
        super().__init__(f"malformed UTF-8 text: {reason}", offset)
        self.reason = reason


class SchemaTooDeepError(SchemaDecodeError):
    """Raised when type nesting exceeds the configured depth bound."""

    def __init__(self, max_depth: int, offset: Optional[int] = None) -> None:
        super().__init__(f"schema nesting exceeds max depth {max_depth}", offset)
        self.max_depth = max_depth


class TrailingBytesError(SchemaDecodeError):
    """Raised by strict whole-buffer decoding when bytes remain after the schema."""

    def __init__(self, remaining: int, offset: Optional[int] = None) -> None:
        super().__init__(f"schema followed by trailing bytes ({remaining} pending)", offset)
        self.remaining = remaining
