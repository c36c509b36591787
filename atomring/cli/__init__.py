"""Command-line interface for AtomRing.

Usage:
    # Insert a plus at index 0 of (H He Li H)
    atomring simulate --field "1 2 3 1" --insert "+@0"

    # Mixed actions run in the order given
    atomring simulate --field "H He Li Be" --insert "(+)@2" --remove 0 --json

    # Look up a catalog entry
    atomring atom He
"""

from atomring.cli.commands import build_parser, main

__all__ = ["build_parser", "main"]
