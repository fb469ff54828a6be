"""Unit tests for src/tictactoe/board.py and src/tictactoe/cell.py"""

import pytest

from src.core.exceptions import InvalidBoardError
from src.tictactoe.board import CELL_COUNT, WINNING_LINES, Board
from src.tictactoe.cell import Cell


# -- PARSING --
def test_parse_string() -> None:
    board = Board.from_string("XO-------")
    assert board.cells == (Cell.X, Cell.O) + (Cell.EMPTY,) * 7


def test_parse_list_of_symbols() -> None:
    board = Board.from_string(["-", "-", "-", "-", "X", "-", "-", "-", "O"])
    assert board.cell(4) == Cell.X
    assert board.cell(8) == Cell.O
    assert board.count(Cell.EMPTY) == 7


def test_underscore_is_an_empty_cell() -> None:
    """Both '-' and '_' read as empty, but the board is always written back with '-'."""
    board = Board.from_string("X___O____")
    assert board == Board.from_string("X---O----")
    assert board.to_string() == "X---O----"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "X",
        "--------",  # 8 cells
        "----------",  # 10 cells
        ["X", "O"],
    ],
)
def test_wrong_length(raw: str | list[str]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_string(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "x--------",  # lower case is not a marker
        "XO-----Z-",
        "--- -----",
        "0--------",
        ["X", "-", "-", "-", "-", "-", "-", "-", "XX"],
    ],
)
def test_unknown_symbol(raw: str | list[str]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_string(raw)


@pytest.mark.parametrize("raw", [None, 123456789, b"---------", {"board": "---------"}])
def test_not_a_board_at_all(raw: object) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_string(raw)  # type: ignore[arg-type]


def test_direct_construction_checks_cell_count() -> None:
    with pytest.raises(InvalidBoardError):
        Board((Cell.EMPTY,) * 4)


# -- HELPERS --
def test_empty_board() -> None:
    board = Board.empty()
    assert board.to_string() == "-" * CELL_COUNT
    assert board.count(Cell.EMPTY) == CELL_COUNT
    assert not board.is_full()


def test_differing_cells() -> None:
    before = Board.from_string("X---O----")
    after = Board.from_string("XO--O---X")
    assert before.differing_cells(after) == [1, 8]
    assert before.differing_cells(before) == []


def test_there_are_eight_lines() -> None:
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8


@pytest.mark.parametrize(
    "raw, expected_owners",
    [
        ("---------", set()),
        ("XXXOO----", {Cell.X}),
        ("X--X--X--", {Cell.X}),
        ("O-X-O-X-O", {Cell.O}),
        ("XXOXOOO-X", {Cell.O}),  # anti-diagonal
        ("XXXOOO---", {Cell.X, Cell.O}),
        ("XOXXOOOXX", set()),
    ],
)
def test_line_owners(raw: str, expected_owners: set[Cell]) -> None:
    assert Board.from_string(raw).line_owners() == expected_owners
