"""
Custom exceptions raised by the domain and repository layers.

Everything derives from GameError, so the HTTP layer only has to catch one type.
"""

from typing import Optional

from src.core.shared_types import MoveViolation, RuleViolationCause


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game."""

    error_kind = "game_error"

    @property
    def sub_reason(self) -> Optional[str]:
        return None


# --- Board engine ---
class InvalidBoardError(GameError):
    """Board input could not be parsed: wrong length or unknown symbol."""

    error_kind = "invalid_board"


class RuleViolationError(GameError):
    """Board is well-formed, but could never occur in a real game."""

    error_kind = "rule_violation"

    def __init__(self, message: str, cause: RuleViolationCause) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def sub_reason(self) -> Optional[str]:
        return self.cause.name.lower()


class MoveViolationError(GameError):
    """Proposed board is not a legal next step from the current board."""

    error_kind = "move_violation"

    def __init__(self, message: str, reason: MoveViolation) -> None:
        super().__init__(message)
        self.reason = reason

    @property
    def sub_reason(self) -> Optional[str]:
        return self.reason.name.lower()


# --- Persistence ---
class RepositoryError(GameError):
    error_kind = "repository_error"


class GameNotFoundError(RepositoryError):
    error_kind = "not_found"

    def __init__(self, game_id: str) -> None:
        super().__init__(f"Game with {game_id=} not found.")
        self.game_id = game_id
