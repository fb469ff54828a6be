"""Requests and Response models"""

from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.models import GameModel
from src.core.shared_types import Outcome

# Either "XO-------" or ["X", "O", "-", ...]. Shape and content are both judged by the board engine, not here,
# so a bad board gets the same error response whatever is wrong with it.
BoardInput = Any


# --- REQUEST MODELS ---
class BoardRequest(BaseModel):
    board: BoardInput

    @field_validator("board")
    @classmethod
    def strip_board(cls, value: BoardInput) -> BoardInput:
        """Surrounding whitespace is tolerated."""
        if isinstance(value, str):
            return value.strip()
        return value


class CreateGameRequest(BoardRequest):
    pass


class MoveRequest(BoardRequest):
    """
    Clients submit the whole game with the board as it should look after their move.
    Only the board is used: the ID comes from the URL and the status is recomputed.
    """

    model_config = ConfigDict(populate_by_name=True)

    game_id: Optional[str] = Field(default=None, alias="id")
    status: Optional[str] = None


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(alias="id")
    board: str
    status: Outcome

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        return cls(game_id=model.game_id, board=model.board, status=model.status)


class LocationResponse(BaseModel):
    location: str


class ErrorResponse(BaseModel):
    detail: str
    error: str
    reason: Optional[str] = None
