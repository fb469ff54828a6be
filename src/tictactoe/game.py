"""
The Game is the entrypoint into the domain layer for the repository.
It pairs an identifier with a board, and keeps the outcome in sync with that board.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Self

from src.core.models import GameModel
from src.core.shared_types import Outcome
from src.tictactoe.board import Board
from src.tictactoe.rules import apply_move, classify, parse, validate_board


@dataclass(frozen=True)
class Game:
    game_id: str
    board: Board
    outcome: Outcome

    @classmethod
    def start(cls, game_id: str, board: Board) -> Self:
        """New game from any board that could occur during play (not only the empty one)."""
        validate_board(board)
        return cls(game_id=game_id, board=board, outcome=classify(board))

    def to_model(self) -> GameModel:
        return GameModel(
            game_id=self.game_id, board=self.board.to_string(), status=self.outcome
        )

    def play(self, proposed: Board | str | Sequence[str]) -> Self:
        """Return the game after the move found in the proposed board. This Game itself is left untouched."""
        if not isinstance(proposed, Board):
            proposed = parse(proposed)
        new_board = apply_move(self.board, proposed)
        return replace(self, board=new_board, outcome=classify(new_board))
