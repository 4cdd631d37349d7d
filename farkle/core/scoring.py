from typing import List, Tuple
from dataclasses import dataclass
from .dice import DiceSet, FACES, MAX_DICE


@dataclass
class ScoringCombination:
    """Represents a scoring combination."""
    dice_used: List[int]
    points: int
    description: str

    def __str__(self) -> str:
        return f"{self.description}: {self.points} points"


class ScoringEngine:
    """Handles all scoring logic for Farkle."""

    TRIPLE_SCORES = {
        1: 1000,
        2: 200,
        3: 300,
        4: 400,
        5: 500,
        6: 600
    }

    SINGLE_SCORES = {
        1: 100,
        5: 50
    }

    STRAIGHT_SCORE = 1500

    @staticmethod
    def is_straight(dice: DiceSet) -> bool:
        """Check for one die of every face in a six-dice set."""
        return dice.total == MAX_DICE and all(c == 1 for c in dice.counts)

    def calculate_score(self, dice: DiceSet) -> Tuple[int, List[ScoringCombination]]:
        """Calculate total score and identify all scoring combinations."""
        if self.is_straight(dice):
            return self.STRAIGHT_SCORE, [ScoringCombination(
                dice_used=list(FACES),
                points=self.STRAIGHT_SCORE,
                description="Straight"
            )]

        combinations = []
        for face in FACES:
            count = dice.count(face)
            if count >= 3:
                triples, leftover = divmod(count, 3)
                for _ in range(triples):
                    combinations.append(ScoringCombination(
                        dice_used=[face] * 3,
                        points=self.TRIPLE_SCORES[face],
                        description=f"Three {face}s"
                    ))
            else:
                leftover = count

            # Leftovers only count for faces that score alone
            if face in self.SINGLE_SCORES:
                for _ in range(leftover):
                    combinations.append(ScoringCombination(
                        dice_used=[face],
                        points=self.SINGLE_SCORES[face],
                        description=f"Single {face}"
                    ))

        total_score = sum(combo.points for combo in combinations)
        return total_score, combinations

    def score(self, dice: DiceSet) -> int:
        """Score a set of dice."""
        total_score, _ = self.calculate_score(dice)
        return total_score

    def is_bust(self, dice: DiceSet) -> bool:
        """Check if a roll has no scoring dice (a Farkle)."""
        if self.is_straight(dice):
            return False
        if dice.count(1) >= 1 or dice.count(5) >= 1:
            return False
        return all(dice.count(face) < 3 for face in (2, 3, 4, 6))

    def scoring_dice(self, dice: DiceSet) -> DiceSet:
        """Get the dice that contribute to the score of a roll."""
        if self.is_straight(dice):
            return dice
        counts = []
        for face in FACES:
            count = dice.count(face)
            if face in self.SINGLE_SCORES:
                counts.append(count)
            else:
                counts.append(count - count % 3)
        return DiceSet(tuple(counts))
