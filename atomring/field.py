"""The game board: a ring containing 1 to 18 atoms.

The purpose of this module is to store the board state and implement
reactions. It does not embody game mechanics: duplicating an atom is just an
:meth:`Field.insert` (with the *external* restriction that the atom already
be on the board), and using a minus is a :meth:`Field.remove`. Generating the
next atom to offer the player is not modelled here either.

Reaction flow for every top-level call:

1. Mutate the ring and notify listeners of the raw insert/remove.
2. Run the special-atom rule that applies at the touched index (dark plus
   first, then plus) through the collapse loop.
3. Resolve any plus left adjacent to the last result, counterclockwise
   first, until no adjacent plus fuses.

Not safe for concurrent use; one caller owns a field.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .errors import FieldIndexError, InvalidArgumentError, InvalidStateError
from .listeners import FieldListener
from .models import Atom, Token, is_dark_plus, is_plus, is_token, token_key
from .periodic_table import PeriodicTable, default_table
from .reactions import (
    DARK_PLUS_REACTION,
    PLUS_REACTION,
    Reaction,
    ReactionContext,
)

logger = logging.getLogger(__name__)

__all__ = ["Field"]


def _check_index(index: object, upper: int, inclusive: bool) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise FieldIndexError(f"index must be an int, got {type(index).__name__}", index=index)
    limit = upper if inclusive else upper - 1
    if not 0 <= index <= limit:
        bounds = f"[0, {upper}]" if inclusive else f"[0, {upper})"
        raise FieldIndexError(f"index {index} out of range", index=index, bounds=bounds)


class Field:
    """Circular, mutable sequence of tokens with chained reactions.

    Two fields are equal when one is a rotation of the other: index does not
    matter but order does, so ``(1 2 1 3) == (3 1 2 1)`` while
    ``(1 2 3) != (1 3 2)``.
    """

    def __init__(self, initial_contents: Iterable[Token], table: PeriodicTable | None = None):
        """
        Args:
            initial_contents: Atoms (or special atoms) in index order
            table: Catalog used for reaction results (default: process table)

        Raises:
            InvalidArgumentError: If the contents are None, empty, or hold
                anything that is not a token
        """
        if initial_contents is None:
            raise InvalidArgumentError("initial_contents is None")
        contents = list(initial_contents)
        if not contents:
            raise InvalidArgumentError("Field requires at least one atom")
        for position, token in enumerate(contents):
            if not is_token(token):
                raise InvalidArgumentError(
                    "initial_contents holds a non-token entry",
                    context={"position": position, "entry": repr(token)},
                )

        self._contents: list[Token] = contents
        self._listeners: list[FieldListener] = []
        self._table = table
        self._reaction_count = 0

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: FieldListener) -> None:
        """Add a listener unless it is already registered."""
        if listener is None:
            raise InvalidArgumentError("listener is None")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: FieldListener) -> None:
        """Remove a listener if present."""
        if listener is None:
            raise InvalidArgumentError("listener is None")
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def count(self) -> int:
        """Number of atoms in the field (always positive)."""
        return len(self._contents)

    def atoms(self) -> tuple[Token, ...]:
        return tuple(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[Token]:
        return iter(tuple(self._contents))

    def __getitem__(self, index: int) -> Token:
        return self._contents[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        if len(other._contents) != len(self._contents):
            return False
        return any(rotation == other._contents for rotation in self._rotations())

    def __hash__(self) -> int:
        # Sorting is rotation-independent, so equal fields hash equally.
        # Many unequal fields collide: (1 2 1 3) and (2 3 1 1) both sort to
        # (1 1 2 3).
        return hash(tuple(sorted(token_key(token) for token in self._contents)))

    def __str__(self) -> str:
        return " ".join(str(token) for token in self._contents)

    def __repr__(self) -> str:
        return f"Field({self})"

    def _rotations(self) -> Iterator[list[Token]]:
        contents = self._contents
        for distance in range(len(contents)):
            yield contents[distance:] + contents[:distance]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, atom: Token, index: int) -> int:
        """Insert before ``index`` and run any resulting reactions.

        Inserting at ``count()`` places the atom between the last and the
        first entries.

        Returns:
            Number of fusion steps the insert caused

        Raises:
            InvalidArgumentError: If the atom is None or not a token
            FieldIndexError: If the index is not in [0, count()]
        """
        if atom is None:
            raise InvalidArgumentError("atom is None")
        if not is_token(atom):
            raise InvalidArgumentError("atom is not a token", context={"atom": repr(atom)})
        _check_index(index, self.count(), inclusive=True)

        self._reaction_count = 0
        self._contents.insert(index, atom)
        for listener in self._listeners:
            listener.on_insert(index, atom)

        context = ReactionContext.at(self._contents, index)

        # At most one dark plus exists, and only while the field holds one or
        # two atoms; otherwise it would already have reacted. A new dark plus
        # next to an old one gives the same result whichever is the center.
        if is_dark_plus(atom):
            context = self._react(context, DARK_PLUS_REACTION)
        elif is_dark_plus(context.counterclockwise_atom):
            context = self._react(
                ReactionContext.at(self._contents, context.counterclockwise_index),
                DARK_PLUS_REACTION,
            )
        elif is_dark_plus(context.clockwise_atom):
            context = self._react(
                ReactionContext.at(self._contents, context.clockwise_index),
                DARK_PLUS_REACTION,
            )
        elif is_plus(atom):
            context = self._react(context, PLUS_REACTION)

        self._react_at_adjacent_plus(context)
        logger.debug(f"insert {atom} at {index}: {self._reaction_count} reaction(s), field now {self}")
        return self._reaction_count

    def remove(self, index: int) -> int:
        """Remove the atom at ``index`` and run any resulting reactions.

        Returns:
            Number of fusion steps the removal caused

        Raises:
            InvalidStateError: If only one atom remains
            FieldIndexError: If the index is not in [0, count())
        """
        if self.count() == 1:
            raise InvalidStateError("The field must not become empty")
        _check_index(index, self.count(), inclusive=False)

        # A dark plus only ever sits in a field of one or two atoms, so no
        # removal can bring it next to a reactive pair.
        self._reaction_count = 0
        del self._contents[index]
        for listener in self._listeners:
            listener.on_remove(index)

        center = index - 1 if index == self.count() else index
        context = ReactionContext.at(self._contents, center)
        if is_plus(context.center_atom):
            context = self._react(context, PLUS_REACTION)

        self._react_at_adjacent_plus(context)
        logger.debug(f"remove at {index}: {self._reaction_count} reaction(s), field now {self}")
        return self._reaction_count

    # ------------------------------------------------------------------
    # Reactions
    # ------------------------------------------------------------------

    def _lookup(self, atomic_number: int) -> Atom:
        table = self._table or default_table()
        return table.atom(atomic_number)

    def _adjust_field(self, context: ReactionContext, result: Atom) -> ReactionContext:
        """Replace the context's three entries with ``result``, notifying listeners.

        Returns:
            A fresh context centered on the result
        """
        result_index = context.result_index

        # Larger index first so the smaller one stays valid.
        del self._contents[max(context.counterclockwise_index, context.clockwise_index)]
        del self._contents[min(context.counterclockwise_index, context.clockwise_index)]
        self._contents[result_index] = result
        self._reaction_count += 1

        for listener in self._listeners:
            listener.on_reaction(
                context.counterclockwise_index,
                context.center_index,
                context.clockwise_index,
                result,
                result_index,
            )

        return ReactionContext.at(self._contents, result_index)

    def _react(self, context: ReactionContext, reaction: Reaction) -> ReactionContext:
        """Collapse atoms for as long as a reaction applies.

        The first step uses ``reaction``; every later step is a plus-style
        continuation, whatever started the chain.

        Returns:
            The last context used
        """
        while not context.is_degenerate and reaction.is_applicable(context):
            result = reaction.react(
                context.counterclockwise_atom,
                context.center_atom,
                context.clockwise_atom,
                lookup=self._lookup,
            )
            logger.debug(
                f"{reaction.name} reaction at {context.center_index}: "
                f"{context.counterclockwise_atom} {context.center_atom} "
                f"{context.clockwise_atom} -> {result}"
            )
            context = self._adjust_field(context, result)
            reaction = PLUS_REACTION

        return context

    def _react_at_adjacent_plus(self, context: ReactionContext) -> None:
        """Fuse at any plus next to the context's center, counterclockwise first.

        Repeats from each new result until no adjacent plus fuses. A plus
        that does not fuse ends the chain: any further plus reachable from it
        is itself next to a plus and cannot fuse either.
        """
        while True:
            if is_plus(context.counterclockwise_atom):
                plus_index = context.counterclockwise_index
            elif is_plus(context.clockwise_atom):
                plus_index = context.clockwise_index
            else:
                return

            before = self._reaction_count
            context = self._react(ReactionContext.at(self._contents, plus_index), PLUS_REACTION)
            if self._reaction_count == before:
                return
