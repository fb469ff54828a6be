"""Implementation of (Game)Repository keeping all games in a dictionary, guarded by a single lock"""

import logging
import threading
from uuid import uuid4

from src.core.exceptions import GameNotFoundError
from src.db.repository import RawBoard
from src.tictactoe.game import Game
from src.tictactoe.rules import parse

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """
    Games live only as long as the process.

    One lock serialises all operations. Input is parsed before the lock is taken,
    so the critical section is only: lookup, rule check, write.
    """

    def __init__(self) -> None:
        self._games: dict[str, Game] = {}
        self._lock = threading.Lock()

    def list_games(self) -> list[Game]:
        """Snapshot of all games, oldest first."""
        with self._lock:
            return list(self._games.values())

    def create_game(self, raw_board: RawBoard) -> Game:
        """Validate the board, store it under a fresh ID and return the new game."""
        board = parse(raw_board)
        game = Game.start(self._new_id(), board)
        with self._lock:
            self._games[game.game_id] = game
        logger.info("Created game %s with board %s (%s)", game.game_id, board, game.outcome)
        return game

    def get_game(self, game_id: str) -> Game:
        """Get game by ID. Raises GameNotFoundError if no such game."""
        with self._lock:
            return self._fetch_game(game_id)

    def update_game(self, game_id: str, raw_board: RawBoard) -> Game:
        """
        Apply the move found in raw_board to the stored game.
        The stored game is only replaced if the move is legal against the state at the time the lock is held.
        """
        proposed = parse(raw_board)
        with self._lock:
            current = self._fetch_game(game_id)
            updated = current.play(proposed)
            self._games[game_id] = updated
        logger.info("Game %s: %s -> %s (%s)", game_id, current.board, updated.board, updated.outcome)
        return updated

    def delete_game(self, game_id: str) -> Game:
        """Remove a game's record and return what was removed."""
        with self._lock:
            game = self._games.pop(game_id, None)
        if game is None:
            raise GameNotFoundError(game_id)
        logger.info("Deleted game %s", game_id)
        return game

    def clear(self) -> None:
        """Drop every game (used at shutdown, and between tests)"""
        with self._lock:
            self._games.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def _new_id(self) -> str:
        return str(uuid4())

    def _fetch_game(self, game_id: str) -> Game:
        """Caller must hold the lock."""
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game
