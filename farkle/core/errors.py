"""Error types for the Farkle engine."""
from enum import Enum


class DiceError(ValueError):
    """Base class for invalid dice input."""


class InvalidFaceError(DiceError):
    """A digit outside 1-6 appeared where a die face was expected."""


class SelectionError(Enum):
    """Why a selection of dice to keep was refused."""
    INVALID_FACE = "invalid_face"
    INSUFFICIENT_DICE = "insufficient_dice"
    NO_SCORING_DICE = "no_scoring_dice"

    @property
    def message(self) -> str:
        messages = {
            SelectionError.INVALID_FACE: "Dice faces must be digits 1-6",
            SelectionError.INSUFFICIENT_DICE: "Selected dice are not all available",
            SelectionError.NO_SCORING_DICE: "Kept dice must score",
        }
        return messages[self]
