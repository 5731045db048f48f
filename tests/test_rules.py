"""Tests for the Conway rule table and cell states."""

import pytest

from toruslife.core.cell import Cell
from toruslife.core.rules import BIRTH_SET, SURVIVAL_SET, next_state, rule_table


class TestCell:
    """Test cell values and symbols."""

    def test_neighbor_weights(self):
        assert int(Cell.DEAD) == 0
        assert int(Cell.LIVE) == 1

    def test_symbols(self):
        assert Cell.DEAD.symbol == '.'
        assert Cell.LIVE.symbol == 'O'


class TestNextState:
    """Test single-cell rule evaluation."""

    @pytest.mark.parametrize("neighbors", [0, 1])
    def test_underpopulation(self, neighbors):
        assert next_state(Cell.LIVE, neighbors) is Cell.DEAD

    @pytest.mark.parametrize("neighbors", [2, 3])
    def test_survival(self, neighbors):
        assert next_state(Cell.LIVE, neighbors) is Cell.LIVE

    @pytest.mark.parametrize("neighbors", [4, 5, 6, 7, 8])
    def test_overpopulation(self, neighbors):
        assert next_state(Cell.LIVE, neighbors) is Cell.DEAD

    def test_reproduction(self):
        assert next_state(Cell.DEAD, 3) is Cell.LIVE

    @pytest.mark.parametrize("neighbors", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_dead_stays_dead(self, neighbors):
        assert next_state(Cell.DEAD, neighbors) is Cell.DEAD


def test_rule_table_complete():
    """Rule table covers every (state, count) pair and matches the B3/S23 sets."""
    table = rule_table()

    assert len(table) == 18
    for (cell, neighbors), result in table.items():
        if cell is Cell.LIVE:
            assert (result is Cell.LIVE) == (neighbors in SURVIVAL_SET)
        else:
            assert (result is Cell.LIVE) == (neighbors in BIRTH_SET)

    born = [key for key, value in table.items() if value is Cell.LIVE]
    assert sorted(born) == [(Cell.DEAD, 3), (Cell.LIVE, 2), (Cell.LIVE, 3)]
