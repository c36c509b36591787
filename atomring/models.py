"""
Token types for the AtomRing field.

A field entry is either a numbered :class:`Atom` from the periodic table or
one of the two :class:`SpecialAtom` markers (plus and dark plus).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .errors import InvalidArgumentError

_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class SpecialAtom(str, Enum):
    """Special (non-numbered) field entries."""
    PLUS = "+"
    DARK_PLUS = "(+)"

    def __str__(self) -> str:
        return self.value


PLUS = SpecialAtom.PLUS
DARK_PLUS = SpecialAtom.DARK_PLUS


@dataclass(frozen=True)
class Atom:
    """An element of the periodic table; not necessarily a real one.

    Equality and hashing use only ``atomic_number``. The display metadata
    (symbol, name, color) is carried along but never compared.
    """
    atomic_number: int
    symbol: str = field(compare=False)
    name: str = field(compare=False)
    color: str = field(compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.atomic_number, bool) or not isinstance(self.atomic_number, int):
            raise InvalidArgumentError(
                "atomic_number must be an int",
                context={"atomic_number": self.atomic_number},
            )
        if self.atomic_number < 1:
            raise InvalidArgumentError(f"atomic_number {self.atomic_number} < 1")
        if self.symbol is None or not self.symbol.strip():
            raise InvalidArgumentError("symbol is empty or only whitespace")
        if self.name is None or not self.name.strip():
            raise InvalidArgumentError("name is empty or only whitespace")
        if self.color is None or not _COLOR_PATTERN.match(self.color.strip()):
            raise InvalidArgumentError(
                "color must be a #rrggbb hex string",
                context={"color": self.color},
            )
        object.__setattr__(self, "symbol", self.symbol.strip())
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "color", self.color.strip().lower())

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Color as an (r, g, b) tuple of 0-255 ints."""
        value = int(self.color[1:], 16)
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF

    def __str__(self) -> str:
        return f"{self.symbol}[{self.atomic_number}]"


Token = Union[Atom, SpecialAtom]


def is_plus(token: Token | None) -> bool:
    return token is SpecialAtom.PLUS


def is_dark_plus(token: Token | None) -> bool:
    return token is SpecialAtom.DARK_PLUS


def is_token(value: object) -> bool:
    """Return True if the value can be placed in a field."""
    return isinstance(value, (Atom, SpecialAtom))


def token_key(token: Token) -> int:
    """Rotation-independent integer key for a token.

    Atoms map to their atomic number, plus to -1 and dark plus to -2.
    Sorting a field's keys gives a projection that is identical for every
    rotation of that field, which is what ``Field.__hash__`` relies on.
    """
    if isinstance(token, Atom):
        return token.atomic_number
    if token is SpecialAtom.PLUS:
        return -1
    return -2


def token_kind(token: Token) -> str:
    """Short label for a token's kind: "atom", "plus" or "dark_plus"."""
    if isinstance(token, Atom):
        return "atom"
    return "plus" if token is SpecialAtom.PLUS else "dark_plus"
