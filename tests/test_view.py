import pytest

from ttt_engine.errors import InvalidInputError
from ttt_engine.view import display_grid, display_row, horizontal_line


def test_horizontal_line_is_space_and_seven_dashes():
    assert horizontal_line() == " -------"


@pytest.mark.parametrize("row,expected", [
    ("000", "| . . . |"),
    ("111", "| X X X |"),
    ("222", "| O O O |"),
    ("012", "| . X O |"),
    ("120", "| X O . |"),
    ("212", "| O X O |"),
])
def test_display_row(row, expected):
    assert display_row(row) == expected


@pytest.mark.parametrize("row", ["", "01", "0123", "0a1"])
def test_display_row_rejects_bad_rows(row):
    with pytest.raises(InvalidInputError):
        display_row(row)


def test_display_empty_grid():
    assert display_grid("000000000") == (
        " -------\n"
        "| . . . |\n"
        "| . . . |\n"
        "| . . . |\n"
        " -------"
    )


@pytest.mark.parametrize("enc,expected", [
    ("012012012",
     " -------\n"
     "| . X O |\n"
     "| . X O |\n"
     "| . X O |\n"
     " -------"),
    ("210001212",
     " -------\n"
     "| O X . |\n"
     "| . . X |\n"
     "| O X O |\n"
     " -------"),
])
def test_display_grid_symbols(enc, expected):
    assert display_grid(enc) == expected


def test_display_grid_rejects_invalid_encoding():
    with pytest.raises(InvalidInputError):
        display_grid("0120")
