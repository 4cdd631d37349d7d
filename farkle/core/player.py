"""Player management for Farkle."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Player:
    """Represents a player in the game."""
    name: str
    score: int = 0
    turn_history: List[int] = field(default_factory=list)

    def add_score(self, points: int):
        """Add a turn's points to player's score."""
        self.score += points
        self.turn_history.append(points)

    @property
    def total_turns(self) -> int:
        """Number of turns played."""
        return len(self.turn_history)

    @property
    def farkles(self) -> int:
        """Number of turns that scored nothing."""
        return sum(1 for points in self.turn_history if points == 0)

    def __str__(self):
        return f"{self.name} ({self.score} points)"
