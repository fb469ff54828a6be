"""The Board holds the 9 cells of one game. Rules that judge a board live in rules.py"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidBoardError
from src.tictactoe.cell import Cell

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Index triples of all rows, columns and both diagonals (row-major numbering 0-8)
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Board:
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise InvalidBoardError(
                f"A board has exactly {CELL_COUNT} cells, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls) -> Self:
        return cls((Cell.EMPTY,) * CELL_COUNT)

    @classmethod
    def from_string(cls, raw: str | Sequence[str]) -> Self:
        """Construct a board from its wire form.

        Either a 9 character string, read row by row:
        "XO-------" means X in the top-left corner, O next to it, everything else empty.
        Or a list of 9 single symbols: ["X", "O", "-", ...]
        """
        if isinstance(raw, (bytes, bytearray)) or not isinstance(raw, Sequence):
            raise InvalidBoardError(
                f"Board must be a string or a list of symbols, got {type(raw).__name__}."
            )
        if len(raw) != CELL_COUNT:
            raise InvalidBoardError(
                f"Board must contain {CELL_COUNT} cells, got {len(raw)}: {raw!r}"
            )
        for symbol in raw:
            if not isinstance(symbol, str):
                raise InvalidBoardError(f"Cell symbols must be strings, got {symbol!r}.")
        return cls(tuple(Cell.from_symbol(symbol) for symbol in raw))

    def to_string(self) -> str:
        return "".join(cell.to_symbol() for cell in self.cells)

    def __str__(self) -> str:
        return self.to_string()

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def differing_cells(self, other: "Board") -> list[int]:
        """Indices where the two boards disagree"""
        return [
            index
            for index, (mine, theirs) in enumerate(zip(self.cells, other.cells))
            if mine != theirs
        ]

    def line_owners(self) -> set[Cell]:
        """Players that own at least one full line. Should hold at most one element on a legal board"""
        owners: set[Cell] = set()
        for a, b, c in WINNING_LINES:
            first = self.cells[a]
            if first != Cell.EMPTY and first == self.cells[b] == self.cells[c]:
                owners.add(first)
        return owners
