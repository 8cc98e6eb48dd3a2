"""
Tests for quizgrid.models.grid
"""

import math

import pytest

from quizgrid.models.grid import CellGrid, column_index


@pytest.mark.parametrize("column,expected", [("A", 0), ("f", 5), ("Z", 25), ("AA", 26), ("AB", 27)])
def test_column_index(column, expected):
    assert column_index(column) == expected


def test_column_index_rejects_garbage():
    with pytest.raises(ValueError):
        column_index("1")
    with pytest.raises(ValueError):
        column_index("")


def test_cell_is_one_based_and_by_letter():
    grid = CellGrid.from_rows([["a1", "b1"], ["a2", "b2"]])
    assert grid.cell(1, "A") == "a1"
    assert grid.cell(2, "B") == "b2"


def test_out_of_range_cells_are_empty():
    grid = CellGrid.from_rows([["a1"]])
    assert grid.cell(0, "A") == ""
    assert grid.cell(5, "A") == ""
    assert grid.cell(1, "J") == ""


def test_values_become_strings():
    grid = CellGrid.from_rows([[None, math.nan, 7, 1.5]])
    assert grid.cell(1, "A") == ""
    assert grid.cell(1, "B") == ""
    assert grid.cell(1, "C") == "7"
    assert grid.cell(1, "D") == "1.5"
    assert grid.row_count == 1
