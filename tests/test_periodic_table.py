"""Unit tests for the periodic table catalog."""

import pytest

from atomring.errors import CatalogError, InvalidArgumentError
from atomring.models import DARK_PLUS, PLUS, Atom
from atomring.periodic_table import PeriodicTable, atom, default_table, max_atom, parse_token


class TestBundledTable:
    """Tests against the packaged CSV."""

    def test_first_entries(self) -> None:
        assert atom(1).symbol == "H"
        assert atom(1).name == "Hydrogen"
        assert atom(2).symbol == "He"
        assert atom(4).name == "Beryllium"

    def test_lookup_returns_shared_instances(self) -> None:
        assert atom(26) is atom(26)

    def test_max_atom(self) -> None:
        assert max_atom().atomic_number == 118
        assert max_atom().symbol == "Og"
        assert len(default_table()) == 118

    def test_numbers_are_consecutive(self) -> None:
        numbers = [entry.atomic_number for entry in default_table()]
        assert numbers == list(range(1, 119))

    def test_number_below_one(self) -> None:
        with pytest.raises(InvalidArgumentError):
            atom(0)

    def test_number_past_end(self) -> None:
        with pytest.raises(CatalogError) as excinfo:
            atom(119)
        assert excinfo.value.context["atomic_number"] == 119

    def test_catalog_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            atom(500)


class TestParseToken:
    """Tests for text-to-token parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("+", PLUS),
            ("(+)", DARK_PLUS),
            (" + ", PLUS),
            ("1", None),
            ("H", None),
            ("h", None),
            ("H[1]", None),
        ],
    )
    def test_hydrogen_and_specials(self, text, expected) -> None:
        assert parse_token(text) == (expected if expected is not None else atom(1))

    def test_two_letter_symbol(self) -> None:
        assert parse_token("He") == atom(2)
        assert parse_token("og") == atom(118)

    def test_display_form_round_trips(self) -> None:
        assert parse_token(str(atom(79))) == atom(79)

    @pytest.mark.parametrize("text", ["", "   ", "Xq", "0", "-1", "++"])
    def test_invalid_text(self, text) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_token(text)

    def test_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_token(None)


class TestLoading:
    """Tests for parsing catalog sources."""

    def test_from_lines(self) -> None:
        table = PeriodicTable.from_lines(
            ["1,A,Alpha,#010203", "", "2,B,Beta,#040506"]
        )
        assert len(table) == 2
        assert table.atom(2) == Atom(2, "B", "Beta", "#040506")
        assert table.max_atom().symbol == "B"

    def test_out_of_sequence(self) -> None:
        with pytest.raises(CatalogError):
            PeriodicTable.from_lines(["1,A,Alpha,#010203", "3,C,Gamma,#040506"])

    def test_wrong_field_count(self) -> None:
        with pytest.raises(CatalogError):
            PeriodicTable.from_lines(["1,A,#010203"])

    def test_bad_number(self) -> None:
        with pytest.raises(CatalogError):
            PeriodicTable.from_lines(["one,A,Alpha,#010203"])

    def test_bad_color(self) -> None:
        with pytest.raises(CatalogError):
            PeriodicTable.from_lines(["1,A,Alpha,blue"])

    def test_empty(self) -> None:
        with pytest.raises(CatalogError):
            PeriodicTable.from_lines([])

    def test_from_csv(self, tmp_path) -> None:
        path = tmp_path / "table.csv"
        path.write_text("1,A,Alpha,#010203\n2,B,Beta,#040506\n", encoding="utf-8")
        table = PeriodicTable.from_csv(path)
        assert table.parse_token("b") == table.atom(2)

    def test_env_override(self, tmp_path, monkeypatch, reset_caches) -> None:
        path = tmp_path / "table.csv"
        path.write_text("1,A,Alpha,#010203\n2,B,Beta,#040506\n", encoding="utf-8")
        monkeypatch.setenv("ATOMRING_PERIODIC_TABLE_PATH", str(path))

        assert max_atom().symbol == "B"
        assert atom(1).name == "Alpha"
