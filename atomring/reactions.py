"""Reaction contexts and the two reaction rules.

A :class:`ReactionContext` is a snapshot of a center index and its two ring
neighbours, taken from the field's contents at construction time. It goes
stale as soon as the field mutates, so a fresh one is built after every
structural change.

There are exactly two rules, each with a single module-level instance:

- :data:`PLUS_REACTION` fuses equal neighbours around a plus (or, as a
  chain continues, around the previous result).
- :data:`DARK_PLUS_REACTION` fuses any two neighbours around a dark plus.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence

from .errors import FieldIndexError
from .models import Atom, Token, is_dark_plus, is_plus
from .periodic_table import atom

__all__ = [
    "DARK_PLUS_REACTION",
    "PLUS_REACTION",
    "DarkPlusReaction",
    "PlusReaction",
    "Reaction",
    "ReactionContext",
]

AtomLookup = Callable[[int], Atom]

# Dark plus flanked by two pluses always yields beryllium.
_DOUBLE_PLUS_RESULT = 4


@dataclass(frozen=True)
class ReactionContext:
    """Where a reaction may occur: a center and its two neighbours."""
    counterclockwise_index: int
    counterclockwise_atom: Token
    center_index: int
    center_atom: Token
    clockwise_index: int
    clockwise_atom: Token
    size: int

    @classmethod
    def at(cls, contents: Sequence[Token], center_index: int) -> "ReactionContext":
        """Build a context from the current contents.

        Raises:
            FieldIndexError: If center_index is not in [0, len(contents))
        """
        count = len(contents)
        if not 0 <= center_index < count:
            raise FieldIndexError(
                f"center index {center_index} out of range",
                index=center_index,
                bounds=f"[0, {count})",
            )
        ccw = (center_index - 1 + count) % count
        cw = (center_index + 1) % count
        return cls(
            counterclockwise_index=ccw,
            counterclockwise_atom=contents[ccw],
            center_index=center_index,
            center_atom=contents[center_index],
            clockwise_index=cw,
            clockwise_atom=contents[cw],
            size=count,
        )

    @property
    def is_degenerate(self) -> bool:
        """True when both neighbours are the same slot (two or fewer atoms)."""
        return self.counterclockwise_index == self.clockwise_index

    @property
    def result_index(self) -> int:
        """Where the center lands once both neighbours are removed."""
        return (
            self.center_index
            - (1 if self.counterclockwise_index < self.center_index else 0)
            - (1 if self.clockwise_index < self.center_index else 0)
        )


class Reaction(ABC):
    """Determines if a reaction is possible and if so, how tokens combine."""

    name: str = "reaction"

    def is_applicable(self, context: ReactionContext) -> bool:
        if context.size < 3:
            return False
        return self._matches(context)

    @abstractmethod
    def _matches(self, context: ReactionContext) -> bool:
        ...

    @abstractmethod
    def result_number(self, counterclockwise: Token, center: Token, clockwise: Token) -> int:
        """Atomic number produced by fusing the three tokens."""

    def react(
        self,
        counterclockwise: Token,
        center: Token,
        clockwise: Token,
        lookup: AtomLookup = atom,
    ) -> Atom:
        """Fuse three tokens. Called only when applicable."""
        return lookup(self.result_number(counterclockwise, center, clockwise))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PlusReaction(Reaction):
    """How plus works, and how every chain continues after the first step."""

    name = "plus"

    def _matches(self, context: ReactionContext) -> bool:
        ccw = context.counterclockwise_atom
        cw = context.clockwise_atom
        return (
            isinstance(ccw, Atom)
            and isinstance(cw, Atom)
            and not is_dark_plus(context.center_atom)
            and ccw == cw
        )

    def result_number(self, counterclockwise: Token, center: Token, clockwise: Token) -> int:
        # Neighbours are equal atoms per applicability.
        adjacent = counterclockwise.atomic_number
        if is_plus(center):
            return adjacent + 1
        if adjacent < center.atomic_number:
            return center.atomic_number + 1
        return adjacent + 2


class DarkPlusReaction(Reaction):
    """How dark plus works: any two neighbours fuse."""

    name = "dark_plus"

    def _matches(self, context: ReactionContext) -> bool:
        return is_dark_plus(context.center_atom)

    def result_number(self, counterclockwise: Token, center: Token, clockwise: Token) -> int:
        if is_plus(counterclockwise) and is_plus(clockwise):
            return _DOUBLE_PLUS_RESULT
        if is_plus(counterclockwise):
            # Not documented by the game; +3 on the remaining neighbour.
            return clockwise.atomic_number + 3
        if is_plus(clockwise):
            return counterclockwise.atomic_number + 3
        return max(counterclockwise.atomic_number, clockwise.atomic_number) + 3


PLUS_REACTION = PlusReaction()
DARK_PLUS_REACTION = DarkPlusReaction()

