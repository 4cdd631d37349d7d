"""Splitting a player's choice of dice out of a roll."""
from dataclasses import dataclass
from typing import Optional
import logging

from .dice import DiceSet, DigitSequence, count_faces
from .errors import InvalidFaceError, SelectionError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Outcome of splitting a choice out of the available dice.

    Exactly one of ``error`` or the ``kept``/``remaining`` pair is set.
    """
    kept: Optional[DiceSet] = None
    remaining: Optional[DiceSet] = None
    error: Optional[SelectionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def select_dice(available: DiceSet, choice: DigitSequence) -> Selection:
    """Partition available into the chosen dice and the rest.

    ``choice`` is a digit sequence naming one face per die to keep. Player
    mistakes come back as a failed Selection rather than an exception, and
    ``available`` is never modified.
    """
    try:
        kept = DiceSet(count_faces(choice))
    except InvalidFaceError:
        logger.debug("Rejected selection %r: invalid face", choice)
        return Selection(error=SelectionError.INVALID_FACE)

    if not available.contains(kept):
        logger.debug("Rejected selection %r: not in %s", choice, available)
        return Selection(error=SelectionError.INSUFFICIENT_DICE)

    return Selection(kept=kept, remaining=available.minus(kept))
