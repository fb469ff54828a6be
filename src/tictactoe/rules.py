"""
The rules of tic-tac-toe, applied to Board values.

None of these functions keep state: they take boards and either return a result or raise a GameError subclass.
"""

from collections.abc import Sequence

from src.core.exceptions import MoveViolationError, RuleViolationError
from src.core.shared_types import MoveViolation, Outcome, RuleViolationCause
from src.tictactoe.board import Board
from src.tictactoe.cell import Cell

WINNER_TO_OUTCOME: dict[Cell, Outcome] = {
    Cell.X: Outcome.X_WINS,
    Cell.O: Outcome.O_WINS,
}


def parse(raw: str | Sequence[str]) -> Board:
    """Wire form -> Board. Raises InvalidBoardError."""
    return Board.from_string(raw)


def player_to_move(board: Board) -> Cell:
    """X always opens, so X moves whenever both players have placed the same number of marks."""
    return Cell.X if board.count(Cell.X) == board.count(Cell.O) else Cell.O


def validate_board(board: Board) -> None:
    """
    A board is only accepted if it could have been reached by taking turns:
    1. X has as many marks as O, or exactly one more.
    2. No more than one player has three in a row.
    """
    x_count = board.count(Cell.X)
    o_count = board.count(Cell.O)
    if x_count - o_count not in (0, 1):
        raise RuleViolationError(
            f"Invalid board {board}: X has {x_count} marks and O has {o_count}. X moves first and turns alternate.",
            cause=RuleViolationCause.IMBALANCED_MARKS,
        )

    if len(board.line_owners()) > 1:
        raise RuleViolationError(
            f"Invalid board {board}: both players have three in a row.",
            cause=RuleViolationCause.MULTIPLE_WINNERS,
        )


def classify(board: Board) -> Outcome:
    """Winner if any, a draw on a full board without winner, otherwise the game is still running."""
    owners = board.line_owners()
    for cell, outcome in WINNER_TO_OUTCOME.items():
        if cell in owners:
            return outcome
    if board.is_full():
        return Outcome.DRAW
    return Outcome.IN_PROGRESS


def apply_move(current: Board, proposed: Board) -> Board:
    """
    Accept the proposed board if it is exactly one legal move ahead of the current board.
    ----

    The client never names the move; it is found by comparing both boards:
    1. the game must still be running
    2. if exactly one cell changed:
       a. that cell was empty before
       b. the new mark belongs to the player whose turn it is
    3. otherwise the proposed board must itself pass validate_board,
       and is then refused for changing more (or less) than one cell
    """
    outcome = classify(current)
    if outcome != Outcome.IN_PROGRESS:
        raise MoveViolationError(
            f"Game is already over. status: {outcome}", reason=MoveViolation.GAME_OVER
        )

    changed = current.differing_cells(proposed)
    if len(changed) == 1:
        _check_single_move(current, proposed, changed[0])
        return proposed

    validate_board(proposed)
    raise MoveViolationError(
        f"A move changes exactly one cell, but {len(changed)} cells changed: {current} -> {proposed}",
        reason=MoveViolation.NOT_SINGLE_CELL_CHANGE,
    )


def _check_single_move(current: Board, proposed: Board, index: int) -> None:
    """A single changed cell passing these checks always leaves a valid board behind."""
    if current.cell(index) != Cell.EMPTY:
        raise MoveViolationError(
            f"Cell {index} is already taken by {current.cell(index).name}.",
            reason=MoveViolation.CELL_OCCUPIED,
        )

    expected = player_to_move(current)
    placed = proposed.cell(index)
    if placed != expected:
        raise MoveViolationError(
            f"It is {expected.name}'s turn, but {placed.name} was placed in cell {index}.",
            reason=MoveViolation.WRONG_TURN,
        )
