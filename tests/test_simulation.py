"""Tests for replaying caller-chosen actions."""

import pytest
from pydantic import ValidationError

from atomring.errors import FieldIndexError, InvalidArgumentError, InvalidStateError
from atomring.models import PLUS
from atomring.periodic_table import atom
from atomring.simulation import (
    InsertAction,
    RemoveAction,
    SimulationRequest,
    build_field,
    simulate,
)


class TestSimulationRequest:
    def test_actions_are_discriminated_by_kind(self) -> None:
        request = SimulationRequest.model_validate(
            {
                "field": ["1", "2"],
                "actions": [
                    {"kind": "insert", "token": "+", "index": 0},
                    {"kind": "remove", "index": 1},
                ],
            }
        )
        assert isinstance(request.actions[0], InsertAction)
        assert isinstance(request.actions[1], RemoveAction)

    def test_empty_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SimulationRequest(field=[], actions=[])

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SimulationRequest.model_validate(
                {"field": ["1"], "actions": [{"kind": "swap", "index": 0}]}
            )


class TestSimulate:
    """Tests for simulate()."""

    def test_build_field(self) -> None:
        field = build_field(["H", "2", "+", "Li[3]"])
        assert field.atoms() == (atom(1), atom(2), PLUS, atom(3))

    def test_insert_plus(self) -> None:
        result = simulate(
            SimulationRequest(
                field=["1", "2", "3", "1"],
                actions=[InsertAction(token="+", index=0)],
            )
        )
        assert result.field == ["He[2]", "He[2]", "Li[3]"]
        assert result.count == 3
        assert result.reactions == 1
        assert [event["type"] for event in result.events] == ["insert", "reaction"]
        assert result.events[1]["result_number"] == 2

    def test_insert_dark_plus(self) -> None:
        result = simulate(
            SimulationRequest(
                field=["H", "He", "Li", "Be"],
                actions=[InsertAction(token="(+)", index=2)],
            )
        )
        assert result.field == ["H[1]", "C[6]", "Be[4]"]
        assert result.events[1] == {
            "type": "reaction",
            "ccw_index": 1,
            "center_index": 2,
            "cw_index": 3,
            "result": "C[6]",
            "result_number": 6,
            "result_index": 1,
        }

    def test_mixed_actions_in_order(self) -> None:
        result = simulate(
            SimulationRequest(
                field=["2", "5", "+", "2"],
                actions=[RemoveAction(index=1), InsertAction(token="7", index=0)],
            )
        )
        assert result.field == ["N[7]", "Li[3]"]
        assert result.reactions == 1
        assert [event["type"] for event in result.events] == ["remove", "reaction", "insert"]

    def test_no_actions(self) -> None:
        result = simulate(SimulationRequest(field=["1"]))
        assert result.field == ["H[1]"]
        assert result.events == []

    def test_bad_token(self) -> None:
        with pytest.raises(InvalidArgumentError):
            simulate(SimulationRequest(field=["1", "Qq"]))

    def test_bad_index(self) -> None:
        with pytest.raises(FieldIndexError):
            simulate(
                SimulationRequest(field=["1"], actions=[InsertAction(token="2", index=5)])
            )

    def test_emptying_field(self) -> None:
        with pytest.raises(InvalidStateError):
            simulate(SimulationRequest(field=["1"], actions=[RemoveAction(index=0)]))
