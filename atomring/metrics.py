"""Prometheus metrics for AtomRing fields.

Counters are fed by :class:`MetricsListener`, which callers attach to any
field they want instrumented. Chain lengths are observed by whoever drives
the field (the simulation helper does this), since a listener cannot tell
where one top-level operation ends.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram

from .listeners import FieldListener
from .models import Atom, Token, token_kind


FIELD_INSERTS: Final[Counter] = Counter(
    "atomring_field_inserts_total",
    "Total raw inserts into fields, labeled by token kind.",
    labelnames=("token_kind",),
)

FIELD_REMOVES: Final[Counter] = Counter(
    "atomring_field_removes_total",
    "Total raw removals from fields.",
)

FIELD_REACTIONS: Final[Counter] = Counter(
    "atomring_field_reactions_total",
    "Total fusion steps across all fields.",
)

REACTION_RESULT_NUMBER: Final[Histogram] = Histogram(
    "atomring_reaction_result_number",
    "Atomic number of each fusion result.",
    buckets=(2, 4, 8, 12, 16, 24, 32, 48, 64, 96, 118),
)

CHAIN_LENGTH: Final[Histogram] = Histogram(
    "atomring_chain_length",
    "Fusion steps caused by one insert or remove, labeled by operation.",
    labelnames=("operation",),
    buckets=(0, 1, 2, 3, 4, 6, 8),
)


class MetricsListener(FieldListener):
    """Records field events as Prometheus metrics."""

    def on_insert(self, index: int, atom: Token) -> None:
        FIELD_INSERTS.labels(token_kind=token_kind(atom)).inc()

    def on_reaction(self, ccw_index, center_index, cw_index, result: Atom, result_index) -> None:
        FIELD_REACTIONS.inc()
        REACTION_RESULT_NUMBER.observe(result.atomic_number)

    def on_remove(self, index: int) -> None:
        FIELD_REMOVES.inc()


def observe_chain_length(operation: str, reactions: int) -> None:
    CHAIN_LENGTH.labels(operation=operation).observe(reactions)
