"""Subcommands for the ``atomring`` console script."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from atomring.errors import AtomRingError
from atomring.logging_config import setup_logging
from atomring.models import Atom
from atomring.periodic_table import parse_token
from atomring.simulation import InsertAction, RemoveAction, SimulationRequest, simulate

logger = logging.getLogger(__name__)


def _insert_action(text: str) -> InsertAction:
    """Parse ``TOKEN@INDEX``, e.g. ``+@0`` or ``He@3``."""
    token, sep, index = text.rpartition("@")
    if not sep or not token:
        raise argparse.ArgumentTypeError(f"expected TOKEN@INDEX, got {text!r}")
    try:
        return InsertAction(token=token, index=int(index))
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad index in {text!r}") from None


def _remove_action(text: str) -> RemoveAction:
    try:
        return RemoveAction(index=int(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad index {text!r}") from None


def cmd_simulate(args: argparse.Namespace) -> int:
    """Replay actions on a field and print the outcome."""
    try:
        request = SimulationRequest(field=args.field.split(), actions=args.actions or [])
    except ValidationError as e:
        logger.error(f"Invalid request: {e}")
        return 1

    try:
        result = simulate(request)
    except AtomRingError as e:
        logger.error(f"Simulation failed: {e}")
        if args.json:
            print(json.dumps({"error": e.to_dict()}))
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
        return 0

    for event in result.events:
        details = ", ".join(f"{k}={v}" for k, v in event.items() if k != "type")
        print(f"{event['type']:<9} {details}")
    print(f"field ({result.count}): {' '.join(result.field)}")
    print(f"reactions: {result.reactions}")
    return 0


def cmd_atom(args: argparse.Namespace) -> int:
    """Print one catalog entry."""
    try:
        token = parse_token(args.token)
    except AtomRingError as e:
        logger.error(f"Lookup failed: {e}")
        return 1

    if isinstance(token, Atom):
        print(f"{token.atomic_number} {token.symbol} {token.name} {token.color}")
    else:
        print(f"{token} (special)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomring",
        description="Reaction engine for the circular atom-fusion board",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    simulate_parser = subparsers.add_parser("simulate", help="Replay inserts/removes on a field")
    simulate_parser.add_argument(
        "--field",
        required=True,
        help='Space-separated initial tokens, e.g. "1 2 3 1" or "H He + Li"',
    )
    simulate_parser.add_argument(
        "--insert",
        dest="actions",
        action="append",
        type=_insert_action,
        metavar="TOKEN@INDEX",
        help="Insert TOKEN before INDEX (repeatable)",
    )
    simulate_parser.add_argument(
        "--remove",
        dest="actions",
        action="append",
        type=_remove_action,
        metavar="INDEX",
        help="Remove the token at INDEX (repeatable)",
    )
    simulate_parser.add_argument("--json", action="store_true", help="JSON output")
    simulate_parser.set_defaults(func=cmd_simulate)

    atom_parser = subparsers.add_parser("atom", help="Look up a periodic table entry")
    atom_parser.add_argument("token", help='Atomic number, symbol, "+" or "(+)"')
    atom_parser.set_defaults(func=cmd_atom)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
