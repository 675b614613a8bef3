"""
`python -m contract_schema` entrypoint.

The CLI lives in `contract_schema/cli.py` so that importing the library does
not pull in argparse wiring.
"""

from __future__ import annotations

from . import cli


def main() -> int:
    """Delegate to `contract_schema.cli.main`."""
    return cli.main()


if __name__ == "__main__":
    raise SystemExit(main())
