"""Monte Carlo simulation of Farkle turns."""
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

import numpy as np

from ..core.dice import MAX_DICE
from ..core.random_source import NumpyRandomSource
from ..core.scoring import ScoringEngine
from ..core.turn import Turn, TurnStatus
from .strategies import Strategy
from .strategy_registry import strategy_registry


logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Results from a Monte Carlo simulation of whole turns."""
    num_simulations: int
    expected_value: float
    std_deviation: float
    percentiles: Dict[int, float]
    score_distribution: np.ndarray
    busted_count: int
    hot_dice_count: int

    @property
    def bust_rate(self) -> float:
        return self.busted_count / self.num_simulations

    @property
    def hot_dice_rate(self) -> float:
        return self.hot_dice_count / self.num_simulations

    def __str__(self) -> str:
        return (
            f"Simulation Results ({self.num_simulations} turns):\n"
            f"  Expected Value: {self.expected_value:.1f}\n"
            f"  Std Deviation: {self.std_deviation:.1f}\n"
            f"  25th Percentile: {self.percentiles[25]:.1f}\n"
            f"  50th Percentile: {self.percentiles[50]:.1f}\n"
            f"  75th Percentile: {self.percentiles[75]:.1f}\n"
            f"  Bust Rate: {self.bust_rate:.1%}\n"
            f"  Hot Dice Rate: {self.hot_dice_rate:.1%}"
        )


class TurnSimulator:
    """Plays turns with a strategy to estimate their value."""

    def __init__(self, scoring_engine: Optional[ScoringEngine] = None):
        self.scoring_engine = scoring_engine or ScoringEngine()

    def play_turn(self, strategy: Strategy, rng) -> Turn:
        """Play one turn to the end using strategy for every decision."""
        turn = Turn(rng, self.scoring_engine)
        while not turn.is_over:
            roll = turn.roll()
            if turn.state.status == TurnStatus.BUSTED:
                break

            result = turn.keep(strategy.select_dice(roll, self.scoring_engine))
            if not result.accepted:
                raise ValueError(f"Strategy chose an invalid selection from {roll}: {result.error}")

            if not strategy.should_continue(turn.state):
                turn.bank()
        return turn

    def simulate_turns(
        self,
        strategy: Union[Strategy, str, None] = None,
        num_turns: int = 10000,
        seed: Optional[int] = None
    ) -> SimulationResult:
        """Simulate many independent turns with one strategy."""
        if num_turns <= 0:
            raise ValueError(f"Number of turns must be positive, got {num_turns}")
        if strategy is None:
            strategy = strategy_registry.get_strategy("conservative")
        elif isinstance(strategy, str):
            strategy = strategy_registry.get_strategy(strategy)

        rng = NumpyRandomSource(seed)
        scores = np.zeros(num_turns, dtype=np.int64)
        busted = 0
        hot_dice = 0

        for i in range(num_turns):
            turn = self.play_turn(strategy, rng)
            scores[i] = turn.final_score
            if turn.state.status == TurnStatus.BUSTED:
                busted += 1
            if turn.state.hot_dice_count:
                hot_dice += 1

        logger.debug("Simulated %d turns with %s", num_turns, strategy.config.name)
        return SimulationResult(
            num_simulations=num_turns,
            expected_value=float(np.mean(scores)),
            std_deviation=float(np.std(scores)),
            percentiles={p: float(np.percentile(scores, p)) for p in (25, 50, 75, 95)},
            score_distribution=scores,
            busted_count=busted,
            hot_dice_count=hot_dice,
        )

    def calculate_probabilities(
        self,
        num_dice: int,
        num_trials: int = 100000,
        seed: Optional[int] = None
    ) -> Dict[str, float]:
        """Estimate the chance that a roll of num_dice dice is a bust."""
        if not 1 <= num_dice <= MAX_DICE:
            raise ValueError(f"Number of dice must be 1-{MAX_DICE}, got {num_dice}")
        rng = NumpyRandomSource(seed)
        values = rng.integers(1, 7, size=(num_trials, num_dice))
        counts = np.stack([(values == face).sum(axis=1) for face in range(1, 7)], axis=1)

        has_single = (counts[:, 0] > 0) | (counts[:, 4] > 0)
        has_triple = (counts[:, [1, 2, 3, 5]] >= 3).any(axis=1)
        is_straight = (counts == 1).all(axis=1) & (num_dice == MAX_DICE)
        busts = ~(has_single | has_triple | is_straight)

        bust_probability = float(busts.mean())
        return {
            "scoring_probability": 1 - bust_probability,
            "bust_probability": bust_probability,
        }
