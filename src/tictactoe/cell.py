"""Defines the contents of a single cell and how it is written down"""

from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidBoardError


class Cell(Enum):
    EMPTY = auto()
    X = auto()
    O = auto()  # noqa: E741

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        if symbol not in SYMBOL_TO_CELL:
            raise InvalidBoardError(
                f"Unknown cell symbol {symbol!r}. Use one of {', '.join(repr(s) for s in SYMBOL_TO_CELL)}."
            )
        return SYMBOL_TO_CELL[symbol]

    def to_symbol(self) -> str:
        return CELL_TO_SYMBOL[self]


EMPTY_SYMBOL = "-"

SYMBOL_TO_CELL: dict[str, Cell] = {
    "X": Cell.X,
    "O": Cell.O,
    EMPTY_SYMBOL: Cell.EMPTY,
    "_": Cell.EMPTY,  # accepted on input, never written out
}

CELL_TO_SYMBOL: dict[Cell, str] = {
    Cell.X: "X",
    Cell.O: "O",
    Cell.EMPTY: EMPTY_SYMBOL,
}
