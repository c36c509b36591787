"""Field listeners and event records.

Listeners are notified synchronously, in registration order, of every
structural change to a :class:`~atomring.field.Field`:

- ``on_insert(index, atom)`` once per raw insert, before any reaction
- ``on_reaction(ccw_index, center_index, cw_index, result, result_index)``
  once per fusion; the three consumed indices are positions *before* the
  fusion, ``result_index`` is the position *after* it
- ``on_remove(index)`` once per raw removal, before any reaction

**Listeners must not throw and must not mutate the field.**
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

from .models import Atom, Token, token_kind

__all__ = [
    "FieldEvent",
    "FieldListener",
    "InsertEvent",
    "LoggingListener",
    "ReactionEvent",
    "RecordingListener",
    "RemoveEvent",
]


class FieldListener:
    """Listener for changes to a field. Callbacks default to no-ops."""

    def on_insert(self, index: int, atom: Token) -> None:
        pass

    def on_reaction(
        self,
        ccw_index: int,
        center_index: int,
        cw_index: int,
        result: Atom,
        result_index: int,
    ) -> None:
        pass

    def on_remove(self, index: int) -> None:
        pass


@dataclass(frozen=True)
class InsertEvent:
    index: int
    atom: Token

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "insert",
            "index": self.index,
            "atom": str(self.atom),
            "kind": token_kind(self.atom),
        }


@dataclass(frozen=True)
class ReactionEvent:
    ccw_index: int
    center_index: int
    cw_index: int
    result: Atom
    result_index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "reaction",
            "ccw_index": self.ccw_index,
            "center_index": self.center_index,
            "cw_index": self.cw_index,
            "result": str(self.result),
            "result_number": self.result.atomic_number,
            "result_index": self.result_index,
        }


@dataclass(frozen=True)
class RemoveEvent:
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": "remove", "index": self.index}


FieldEvent = Union[InsertEvent, ReactionEvent, RemoveEvent]


class RecordingListener(FieldListener):
    """Keeps every event in order of arrival."""

    def __init__(self) -> None:
        self.events: list[FieldEvent] = []

    def on_insert(self, index: int, atom: Token) -> None:
        self.events.append(InsertEvent(index, atom))

    def on_reaction(self, ccw_index, center_index, cw_index, result, result_index) -> None:
        self.events.append(
            ReactionEvent(ccw_index, center_index, cw_index, result, result_index)
        )

    def on_remove(self, index: int) -> None:
        self.events.append(RemoveEvent(index))

    @property
    def reactions(self) -> list[ReactionEvent]:
        return [event for event in self.events if isinstance(event, ReactionEvent)]

    def clear(self) -> None:
        self.events.clear()


class LoggingListener(FieldListener):
    """Writes each event to a logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_insert(self, index: int, atom: Token) -> None:
        self.logger.log(self.level, f"insert {atom} at {index}")

    def on_reaction(self, ccw_index, center_index, cw_index, result, result_index) -> None:
        self.logger.log(
            self.level,
            f"reaction ({ccw_index}, {center_index}, {cw_index}) -> {result} at {result_index}",
        )

    def on_remove(self, index: int) -> None:
        self.logger.log(self.level, f"remove at {index}")
