"""Protocol repository (implemented in memory for now; any other store only needs these methods)"""

from collections.abc import Sequence
from typing import Protocol

from src.tictactoe.game import Game

RawBoard = str | Sequence[str]


class GameRepository(Protocol):
    """Owner of all live games. Every method is atomic with respect to the others."""

    def list_games(self) -> list[Game]:
        """Snapshot of all games, oldest first."""
        ...

    def create_game(self, raw_board: RawBoard) -> Game:
        """Validate the board, store it under a fresh ID and return the new game."""
        ...

    def get_game(self, game_id: str) -> Game:
        """Get game by ID. Raises GameNotFoundError if no such game."""
        ...

    def update_game(self, game_id: str, raw_board: RawBoard) -> Game:
        """Apply the move found in raw_board to the stored game."""
        ...

    def delete_game(self, game_id: str) -> Game:
        """Remove a game's record and return what was removed."""
        ...
