"""
Pydantic request/response models and a replay helper for field actions.

The engine never decides what to play. These models describe an explicit,
caller-chosen sequence of inserts and removes so the HTTP and CLI surfaces
can drive a :class:`~atomring.field.Field` and report what happened.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, Field as PydanticField

from .field import Field
from .listeners import RecordingListener
from .metrics import MetricsListener, observe_chain_length
from .periodic_table import PeriodicTable, default_table

logger = logging.getLogger(__name__)


class InsertAction(BaseModel):
    """Insert a token before ``index``"""
    kind: Literal["insert"] = "insert"
    token: str
    index: int


class RemoveAction(BaseModel):
    """Remove the token at ``index``"""
    kind: Literal["remove"] = "remove"
    index: int


Action = Annotated[Union[InsertAction, RemoveAction], PydanticField(discriminator="kind")]


class SimulationRequest(BaseModel):
    """Initial board plus the actions to replay against it"""
    field: List[str] = PydanticField(..., min_length=1)
    actions: List[Action] = PydanticField(default_factory=list)


class SimulationResult(BaseModel):
    """Final board and every listener event, in order"""
    field: List[str]
    count: int
    reactions: int
    events: List[dict[str, Any]]


def build_field(tokens: List[str], table: PeriodicTable | None = None) -> Field:
    table = table or default_table()
    return Field([table.parse_token(text) for text in tokens], table=table)


def apply_action(field: Field, action: Action, table: PeriodicTable | None = None) -> int:
    """Apply one action; returns the number of fusions it caused."""
    if isinstance(action, InsertAction):
        table = table or default_table()
        reactions = field.insert(table.parse_token(action.token), action.index)
        observe_chain_length("insert", reactions)
    else:
        reactions = field.remove(action.index)
        observe_chain_length("remove", reactions)
    return reactions


def simulate(request: SimulationRequest, table: PeriodicTable | None = None) -> SimulationResult:
    """Replay ``request.actions`` on a fresh field.

    Engine errors (bad tokens, bad indices, emptying the field) propagate
    unchanged; the local field is discarded.
    """
    field = build_field(request.field, table)
    recorder = RecordingListener()
    field.add_listener(recorder)
    field.add_listener(MetricsListener())

    total = 0
    for action in request.actions:
        total += apply_action(field, action, table)

    logger.info(
        f"Simulated {len(request.actions)} action(s): {total} reaction(s), "
        f"{field.count()} atom(s) left"
    )
    return SimulationResult(
        field=[str(token) for token in field],
        count=field.count(),
        reactions=total,
        events=[event.to_dict() for event in recorder.events],
    )
