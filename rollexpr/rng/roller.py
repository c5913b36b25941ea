"""
Source of randomness for dice evaluation.

Expressions never reach for the global random module directly; they draw
from a DiceRoller, which can be seeded for deterministic tests and replays.
"""

import random
from typing import List, Optional

from rollexpr.core.config import get_config


def roll_die(sides: int, rng: random.Random) -> int:
    """
    Roll a single die.

    Args:
        sides: Number of sides, at least 1
        rng: Random generator to draw from

    Returns:
        Uniform integer in [1, sides]

    Raises:
        ValueError: If sides is less than 1
    """
    if sides < 1:
        raise ValueError(f"Die must have at least one side, got {sides}")
    return rng.randint(1, sides)


class DiceRoller:
    """
    Seedable dice roller.

    Each roller owns a private random.Random, so rollers never share state.
    Not locked: give each thread its own roller.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize roller.

        Args:
            seed: Random seed for deterministic rolls (testing/replay)
        """
        self.rng = random.Random(seed)
        self.seed = seed

    def roll_die(self, sides: int) -> int:
        """Roll a single die."""
        return roll_die(sides, self.rng)

    def roll_many(self, count: int, sides: int) -> List[int]:
        """
        Roll several dice of the same size.

        Args:
            count: Number of dice
            sides: Number of sides per die

        Returns:
            List of individual rolls
        """
        return [self.roll_die(sides) for _ in range(count)]

    def set_seed(self, seed: Optional[int]):
        """Change random seed (for testing/replay)."""
        self.seed = seed
        self.rng = random.Random(seed)


_default_roller: Optional[DiceRoller] = None


def get_default_roller() -> DiceRoller:
    """
    Return the process-wide roller used when none is injected.

    Created on first use and seeded from ROLLEXPR_SEED when that is set.
    """
    global _default_roller
    if _default_roller is None:
        _default_roller = DiceRoller(seed=get_config().seed)
    return _default_roller


def reset_default_roller() -> None:
    """Drop the process-wide roller so the next use re-reads the seed."""
    global _default_roller
    _default_roller = None


__all__ = ['DiceRoller', 'roll_die', 'get_default_roller', 'reset_default_roller']
