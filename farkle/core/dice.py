from dataclasses import dataclass
from typing import Iterable, Tuple, Union
import logging

from .errors import InvalidFaceError


logger = logging.getLogger(__name__)

FACES = (1, 2, 3, 4, 5, 6)
MAX_DICE = 6

DigitSequence = Union[str, int]


def count_faces(digits: DigitSequence) -> Tuple[int, ...]:
    """Count each face value in a digit sequence.

    Leading zeros are dropped, as when the sequence is read as a number,
    so "015" counts like 15 and "0", "00" or the integer 0 yield all-zero
    counts. Raises InvalidFaceError on any other character that is not a
    face.
    """
    if isinstance(digits, int):
        if digits < 0:
            raise InvalidFaceError(f"Negative dice sequence: {digits}")
        text = str(digits)
    else:
        text = digits.strip()
    text = text.lstrip("0")

    counts = [0] * len(FACES)
    for char in text:
        if char not in "123456":
            raise InvalidFaceError(f"Invalid die face {char!r} in {text!r}")
        counts[int(char) - 1] += 1
    return tuple(counts)


@dataclass(frozen=True)
class DiceSet:
    """Multiset of six-sided dice, stored as one count per face."""
    counts: Tuple[int, ...] = (0, 0, 0, 0, 0, 0)

    def __post_init__(self):
        if len(self.counts) != len(FACES):
            raise ValueError(f"Expected {len(FACES)} face counts, got {len(self.counts)}")
        if any(c < 0 for c in self.counts):
            raise ValueError(f"Face counts must be non-negative: {self.counts}")
        object.__setattr__(self, "counts", tuple(int(c) for c in self.counts))

    @classmethod
    def roll(cls, n: int, rng) -> "DiceSet":
        """Roll n dice using rng.next_random."""
        if n < 0:
            raise ValueError(f"Cannot roll {n} dice")
        counts = [0] * len(FACES)
        for _ in range(n):
            counts[rng.next_random(6)] += 1
        dice = cls(tuple(counts))
        logger.debug("Rolled %d dice: %s", n, dice)
        return dice

    @classmethod
    def decode(cls, digits: DigitSequence) -> "DiceSet":
        """Create a set from a digit sequence such as "11235" or 11235."""
        return cls(count_faces(digits))

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "DiceSet":
        counts = [0] * len(FACES)
        for value in values:
            if value not in FACES:
                raise InvalidFaceError(f"Invalid die face {value!r}")
            counts[value - 1] += 1
        return cls(tuple(counts))

    @property
    def total(self) -> int:
        """Number of dice in the set."""
        return sum(self.counts)

    def count(self, face: int) -> int:
        """Number of dice showing face."""
        if face not in FACES:
            raise InvalidFaceError(f"Invalid die face {face!r}")
        return self.counts[face - 1]

    def values(self) -> Tuple[int, ...]:
        """Face values sorted ascending."""
        return tuple(face for face in FACES for _ in range(self.counts[face - 1]))

    def encode(self) -> str:
        """Digit-string form, faces sorted ascending."""
        return "".join(str(v) for v in self.values())

    def contains(self, other: "DiceSet") -> bool:
        """Check if every die of other is available in this set."""
        return all(mine >= theirs for mine, theirs in zip(self.counts, other.counts))

    def minus(self, other: "DiceSet") -> "DiceSet":
        """Remove other's dice from this set."""
        if not self.contains(other):
            raise ValueError(f"Cannot remove {other} from {self}")
        return DiceSet(tuple(mine - theirs for mine, theirs in zip(self.counts, other.counts)))

    def __len__(self) -> int:
        return self.total

    def __bool__(self) -> bool:
        return self.total > 0

    def __str__(self) -> str:
        return self.encode()
