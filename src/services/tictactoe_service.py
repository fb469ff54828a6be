"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging

from src.api.models import CreateGameRequest, GameResponse, MoveRequest
from src.core.exceptions import GameError
from src.db.repository import GameRepository
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe games."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def list_games(self) -> list[GameResponse]:
        """Show all recorded games."""
        return [self._create_game_response(game) for game in self.repo.list_games()]

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game from the board in the request."""
        try:
            game = self.repo.create_game(request.board)
        except GameError as exc:
            logger.info("Rejected new game with board %r: %s", request.board, exc)
            raise
        return self._create_game_response(game)

    def get_game(self, game_id: str) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a frontend to check whether the opponent has moved.
        """
        return self._create_game_response(self.repo.get_game(game_id))

    def make_move(self, game_id: str, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""
        if request.game_id is not None and request.game_id != game_id:
            logger.warning(
                "Move request body names game %s but was sent to game %s; using the URL.",
                request.game_id,
                game_id,
            )
        try:
            game = self.repo.update_game(game_id, request.board)
        except GameError as exc:
            logger.info("Rejected move for game %s: %s", game_id, exc)
            raise
        return self._create_game_response(game)

    def delete_game(self, game_id: str) -> GameResponse:
        """Handle a request to delete a Game record. Returns the game as it was before deletion."""
        return self._create_game_response(self.repo.delete_game(game_id))

    # -- Internal helpers --
    def _create_game_response(self, game: Game) -> GameResponse:
        """Convert the Game into a GameResponse (via the boundary GameModel)."""
        return GameResponse.from_model(game.to_model())
