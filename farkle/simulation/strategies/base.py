"""
Computer players for simulated Farkle turns.

A strategy makes the two decisions a human makes at the console: which
dice to keep from a roll and whether to roll the remaining dice or bank.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Any
from dataclasses import dataclass, field
from ...core.dice import DiceSet
from ...core.scoring import ScoringEngine
from ...core.turn import TurnState


@dataclass
class StrategyConfig:
    """Registry name, one-line summary and tuning knobs of a strategy."""
    name: str
    description: str
    parameters: Dict[str, Any] = field(default_factory=dict)


class Strategy(ABC):
    """Plays a Farkle turn without asking anyone."""

    def __init__(self, config: Optional[StrategyConfig] = None):
        self.config = config or self.get_default_config()
        self.setup(**self.config.parameters)

    @abstractmethod
    def setup(self, **kwargs):
        """Store the banking thresholds from the config parameters."""

    @abstractmethod
    def should_continue(self, state: TurnState) -> bool:
        """Return True to roll ``state.dice_to_roll`` dice again, False to bank.

        Called only after a successful keep, so banking is always allowed.
        After hot dice ``dice_to_roll`` is back to six.
        """

    def select_dice(self, roll: DiceSet, scoring_engine: ScoringEngine) -> str:
        """Answer "Which to keep?" for a roll that is not a Farkle.

        Keeps every scoring die, so a straight or an all-scoring roll
        always earns hot dice.
        """
        return scoring_engine.scoring_dice(roll).encode()

    @classmethod
    @abstractmethod
    def get_default_config(cls) -> StrategyConfig:
        """Config used when the registry builds the strategy without overrides."""

    def get_description(self) -> str:
        return f"{self.config.name}: {self.config.description}"
