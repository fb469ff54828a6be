"""
Type definitions used across layers
"""

from enum import StrEnum


class Outcome(StrEnum):
    """Values are the status strings clients see on the wire."""

    IN_PROGRESS = "RUNNING"
    X_WINS = "X_WON"
    O_WINS = "O_WON"
    DRAW = "DRAW"


class MoveViolation(StrEnum):
    NOT_SINGLE_CELL_CHANGE = "not single cell change"
    CELL_OCCUPIED = "cell occupied"
    WRONG_TURN = "wrong turn"
    GAME_OVER = "game over"


class RuleViolationCause(StrEnum):
    IMBALANCED_MARKS = "imbalanced marks"
    MULTIPLE_WINNERS = "multiple winners"
