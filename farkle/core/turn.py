from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum
import logging

from .dice import DiceSet, DigitSequence, MAX_DICE
from .errors import SelectionError
from .scoring import ScoringEngine
from .selection import select_dice


logger = logging.getLogger(__name__)


class TurnStatus(Enum):
    ROLLING = "rolling"
    AWAITING_SELECTION = "awaiting_selection"
    BUSTED = "busted"
    COMPLETE = "complete"


@dataclass
class KeepResult:
    """Outcome of one attempt to keep dice."""
    accepted: bool
    kept: Optional[DiceSet] = None
    points: int = 0
    error: Optional[SelectionError] = None
    hot_dice: bool = False


@dataclass
class TurnState:
    """Represents the current state of a turn."""
    accumulated_score: int = 0
    dice_to_roll: int = MAX_DICE
    current_roll: Optional[DiceSet] = None
    roll_history: List[DiceSet] = field(default_factory=list)
    kept_history: List[DiceSet] = field(default_factory=list)
    status: TurnStatus = TurnStatus.ROLLING
    hot_dice: bool = False
    hot_dice_count: int = 0

    @property
    def final_score(self) -> int:
        """Score the turn is worth; zero unless banked."""
        if self.status == TurnStatus.COMPLETE:
            return self.accumulated_score
        return 0

    @property
    def is_over(self) -> bool:
        return self.status in (TurnStatus.BUSTED, TurnStatus.COMPLETE)


class Turn:
    """Manages a single turn of Farkle."""

    def __init__(self, rng, scoring_engine: Optional[ScoringEngine] = None):
        self.rng = rng
        self.scoring_engine = scoring_engine or ScoringEngine()
        self.state = TurnState()

    def roll(self, values: Optional[DigitSequence] = None) -> DiceSet:
        """Roll the dice still in play.

        ``values`` replaces the random roll with specific faces, for
        scripted play and tests.
        """
        if self.state.status != TurnStatus.ROLLING:
            raise ValueError(f"Cannot roll dice - turn is {self.state.status.value}")

        if values is not None:
            dice = DiceSet.decode(values)
            if dice.total != self.state.dice_to_roll:
                raise ValueError(f"Expected {self.state.dice_to_roll} dice, got {dice.total}")
        else:
            dice = DiceSet.roll(self.state.dice_to_roll, self.rng)

        self.state.current_roll = dice
        self.state.roll_history.append(dice)
        self.state.hot_dice = False

        if self.scoring_engine.is_bust(dice):
            logger.debug("Farkle on %s, forfeiting %d", dice, self.state.accumulated_score)
            self.state.status = TurnStatus.BUSTED
            self.state.accumulated_score = 0
        else:
            self.state.status = TurnStatus.AWAITING_SELECTION
        return dice

    def keep(self, choice: DigitSequence) -> KeepResult:
        """Keep some of the current roll for score.

        A refused choice leaves the turn exactly as it was so the player
        can try again.
        """
        if self.state.status != TurnStatus.AWAITING_SELECTION:
            raise ValueError(f"Cannot keep dice - turn is {self.state.status.value}")

        selection = select_dice(self.state.current_roll, choice)
        if not selection.ok:
            return KeepResult(accepted=False, error=selection.error)

        points = self.scoring_engine.score(selection.kept)
        if points == 0:
            logger.debug("Rejected non-scoring selection %s", selection.kept)
            return KeepResult(accepted=False, kept=selection.kept, error=SelectionError.NO_SCORING_DICE)

        self.state.accumulated_score += points
        self.state.kept_history.append(selection.kept)
        self.state.current_roll = selection.remaining

        if selection.remaining.total == 0:
            logger.debug("Hot dice with %d points", self.state.accumulated_score)
            self.state.hot_dice = True
            self.state.hot_dice_count += 1
            self.state.dice_to_roll = MAX_DICE
        else:
            self.state.dice_to_roll = selection.remaining.total

        self.state.status = TurnStatus.ROLLING
        return KeepResult(accepted=True, kept=selection.kept, points=points, hot_dice=self.state.hot_dice)

    def bank(self) -> int:
        """Stop rolling and keep the accumulated score."""
        if self.state.status != TurnStatus.ROLLING or not self.state.kept_history:
            raise ValueError("Cannot bank - no dice kept since the last roll")
        self.state.status = TurnStatus.COMPLETE
        logger.debug("Banked %d points", self.state.accumulated_score)
        return self.state.accumulated_score

    @property
    def final_score(self) -> int:
        return self.state.final_score

    @property
    def is_over(self) -> bool:
        return self.state.is_over
