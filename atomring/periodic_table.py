"""
The source of all known atoms.

The catalog is a CSV resource with one record per line::

    [atomic number],[symbol],[name],#[hex rgb color]

Records must be numbered consecutively from 1; position defines numbering.
The bundled table lives in ``atomring/data/periodic_table.csv`` and can be
replaced with ``ATOMRING_PERIODIC_TABLE_PATH``.

Usage:
    from atomring.periodic_table import atom, max_atom, parse_token

    hydrogen = atom(1)
    token = parse_token("He")   # atom(2)
    plus = parse_token("+")     # PLUS
"""

from __future__ import annotations

import csv
import logging
import re
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable

from .config import get_config
from .errors import CatalogError, InvalidArgumentError
from .models import DARK_PLUS, PLUS, Atom, SpecialAtom, Token

logger = logging.getLogger(__name__)

# Matches the str() form of an atom, e.g. "He[2]".
_DISPLAY_PATTERN = re.compile(r"^\S+\[(\d+)\]$")

__all__ = [
    "DARK_PLUS",
    "PLUS",
    "PeriodicTable",
    "atom",
    "default_table",
    "max_atom",
    "parse_token",
]


class PeriodicTable:
    """Immutable, number-indexed catalog of atoms."""

    def __init__(self, atoms: Iterable[Atom]):
        self._atoms: tuple[Atom, ...] = tuple(atoms)
        if not self._atoms:
            raise CatalogError("periodic table has no entries")
        for position, entry in enumerate(self._atoms, start=1):
            if entry.atomic_number != position:
                raise CatalogError(
                    f"entry {entry} out of sequence, expected number {position}",
                    atomic_number=entry.atomic_number,
                )
        self._by_symbol = {entry.symbol.lower(): entry for entry in self._atoms}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "PeriodicTable":
        """Parse CSV records; blank lines are skipped."""
        atoms = []
        for line_number, row in enumerate(csv.reader(lines), start=1):
            if not row or not "".join(row).strip():
                continue
            if len(row) != 4:
                raise CatalogError(
                    f"line {line_number}: expected 4 fields, got {len(row)}"
                )
            number, symbol, name, color = row
            try:
                atomic_number = int(number)
            except ValueError:
                raise CatalogError(
                    f"line {line_number}: bad atomic number {number!r}"
                ) from None
            try:
                atoms.append(Atom(atomic_number, symbol, name, color))
            except InvalidArgumentError as e:
                raise CatalogError(f"line {line_number}: {e.message}") from e
        return cls(atoms)

    @classmethod
    def from_csv(cls, path: str | Path) -> "PeriodicTable":
        with open(path, newline="", encoding="utf-8") as handle:
            return cls.from_lines(handle)

    @classmethod
    def bundled(cls) -> "PeriodicTable":
        source = resources.files("atomring").joinpath("data/periodic_table.csv")
        with source.open("r", encoding="utf-8", newline="") as handle:
            return cls.from_lines(handle)

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self):
        return iter(self._atoms)

    def atom(self, atomic_number: int) -> Atom:
        """
        Args:
            atomic_number: Number of the desired atom

        Returns:
            The catalog entry

        Raises:
            InvalidArgumentError: If the number is less than 1
            CatalogError: If the number is past the last entry
        """
        if atomic_number < 1:
            raise InvalidArgumentError(f"atomic_number {atomic_number} < 1")
        if atomic_number > len(self._atoms):
            raise CatalogError(
                f"atomic_number {atomic_number} is past the end of the periodic table",
                atomic_number=atomic_number,
            )
        return self._atoms[atomic_number - 1]

    def max_atom(self) -> Atom:
        return max(self._atoms, key=lambda entry: entry.atomic_number)

    def by_symbol(self, symbol: str) -> Atom:
        try:
            return self._by_symbol[symbol.strip().lower()]
        except KeyError:
            raise InvalidArgumentError(f"unknown symbol {symbol!r}") from None

    def parse_token(self, text: str) -> Token:
        """Parse "+", "(+)", an atomic number, "He[2]" or a symbol into a token."""
        if text is None:
            raise InvalidArgumentError("token text is None")
        cleaned = text.strip()
        if not cleaned:
            raise InvalidArgumentError("token text is empty")
        for special in SpecialAtom:
            if cleaned == special.value:
                return special
        if cleaned.isdigit():
            return self.atom(int(cleaned))
        match = _DISPLAY_PATTERN.match(cleaned)
        if match:
            return self.atom(int(match.group(1)))
        return self.by_symbol(cleaned)


@lru_cache(maxsize=1)
def default_table() -> PeriodicTable:
    """Lazily load the process-wide table (bundled or env override)."""
    override = get_config().periodic_table_path
    if override:
        logger.info(f"Loading periodic table from {override}")
        return PeriodicTable.from_csv(override)
    return PeriodicTable.bundled()


def atom(atomic_number: int) -> Atom:
    return default_table().atom(atomic_number)


def max_atom() -> Atom:
    return default_table().max_atom()


def parse_token(text: str) -> Token:
    return default_table().parse_token(text)
