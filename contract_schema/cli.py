#!/usr/bin/env python3
"""
`contract_schema` command-line interface.

Subcommands:
- `dump`: decode one or more schema files and emit the JSON form of each
  module (`contract_schema.inspect.module_to_dict`).
- `inspect`: decode one schema file and emit a compact summary with
  Rust-flavoured type renderings.

Files are streamed through the same chunked reader the library uses;
`--chunk-size` is mostly useful for exercising that path by hand.

This is the entrypoint for `python -m contract_schema ...` (via `__main__.py`).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import config
from . import decoder as decoder_mod
from . import inspect as inspect_mod
from ._shared.bytes_util import hex_preview
from .errors import SchemaDecodeError


def _options(args: argparse.Namespace) -> decoder_mod.DecodeOptions:
    return decoder_mod.DecodeOptions(
        max_depth=args.max_depth,
        text_errors="replace" if args.lenient_text else "strict",
    )


def _load(path: Path, args: argparse.Namespace):
    return decoder_mod.load_module(path, options=_options(args), chunk_size=args.chunk_size, strict=args.strict)


def _report_failure(path: Path, exc: SchemaDecodeError) -> None:
    head = b""
    if path.is_file():
        with path.open("rb") as fh:
            head = fh.read(32)
    print(f"[!] {path}: {exc}", file=sys.stderr)
    if head:
        print(f"    head: {hex_preview(head)}", file=sys.stderr)


def _emit(text: str, out: Path | None) -> None:
    if out:
        out.write_text(text)
        print(f"[+] wrote {out}")
    else:
        sys.stdout.write(text + ("\n" if not text.endswith("\n") else ""))


def dump_command(args: argparse.Namespace) -> int:
    """`dump`: JSON form of each decoded module."""
    out: list[dict] = []
    for path in args.paths:
        try:
            module = _load(path, args)
        except SchemaDecodeError as exc:
            _report_failure(path, exc)
            return 1
        out.append({"path": str(path), "module": inspect_mod.module_to_dict(module)})
    _emit(json.dumps(out, indent=2), args.out)
    return 0


def inspect_command(args: argparse.Namespace) -> int:
    """`inspect`: per-contract summary of one schema file."""
    try:
        module = _load(args.path, args)
    except SchemaDecodeError as exc:
        _report_failure(args.path, exc)
        return 1
    payload = {"path": str(args.path), **inspect_mod.summarize_module(module).to_dict()}
    _emit(json.dumps(payload, indent=2), args.out)
    return 0


def _add_decode_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--out", type=Path, help="Write JSON to this path instead of stdout")
    p.add_argument("--chunk-size", type=int, default=config.CHUNK_SIZE, help="Bytes per read from the file")
    p.add_argument("--max-depth", type=int, default=config.MAX_DEPTH, help="Maximum nested type depth")
    p.add_argument("--lenient-text", action="store_true", help="Replace malformed UTF-8 instead of failing")
    p.add_argument("--strict", action="store_true", help="Fail if bytes remain after the module")


def main(argv: list[str] | None = None) -> int:
    """
    Entrypoint for the `python -m contract_schema` CLI.

    Accepts an optional `argv` for unit tests and embedding.
    """
    ap = argparse.ArgumentParser(description="Decode binary smart-contract schemas.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    ap_dump = sub.add_parser("dump", help="Dump decoded modules as JSON.")
    ap_dump.add_argument("paths", nargs="+", type=Path, help="Schema files")
    _add_decode_flags(ap_dump)
    ap_dump.set_defaults(func=dump_command)

    ap_inspect = sub.add_parser("inspect", help="Summarize contracts and entrypoints in a schema.")
    ap_inspect.add_argument("path", type=Path, help="Schema file")
    _add_decode_flags(ap_inspect)
    ap_inspect.set_defaults(func=inspect_command)

    args = ap.parse_args(argv)
    if args.chunk_size <= 0:
        ap.error("--chunk-size must be positive")
    if args.max_depth <= 0:
        ap.error("--max-depth must be positive")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
