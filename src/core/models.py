"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The API layer (higher) and the repository/domain layers (lower) exchange the information below,
rather than each other's internal representations.
"""

from dataclasses import dataclass

from src.core.shared_types import Outcome


@dataclass(frozen=True)
class GameModel:
    """Transport-safe representation of a tic-tac-toe game used between API, Service, DB, and Game layers."""

    game_id: str
    board: str
    status: Outcome
