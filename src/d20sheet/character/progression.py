"""
Level progression tables for saves and attack bonus.

Save progressions step a fractional bonus by a fixed increment per level:

         Good          Poor
    0th       2.0           0.0
    1st   2   2.5       0   0.3
    2nd   3   3.0       0   0.7
    3rd   3   3.5       1   1.0
    4th   4   4.0       1   1.3
    5th   4   4.5       1   1.7
    6th   5   5.0       2   2.0

The integer column is the bonus actually applied:

    good(lvl) = 2 + lvl // 2
    poor(lvl) = lvl // 3

Attack progressions are a single per-level multiplier and are a different
type, so the two kinds cannot be passed for one another.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SaveProgression:
    """Save bonus progression: initial value at level 0 plus increment per level."""

    initial: float
    increment: float


@dataclass(frozen=True)
class AttackProgression:
    """Attack bonus progression: bonus gained per level."""

    multiplier: float


GOOD_SAVE_PROGRESSION = SaveProgression(initial=2.0, increment=0.5)
POOR_SAVE_PROGRESSION = SaveProgression(initial=0.0, increment=0.334)

# GOOD shares POOR's value; kept as published until the rules are settled
POOR_BAB_PROGRESSION = AttackProgression(multiplier=0.5)
AVERAGE_BAB_PROGRESSION = AttackProgression(multiplier=0.75)
GOOD_BAB_PROGRESSION = AttackProgression(multiplier=0.5)

SAVE_PROGRESSIONS: dict[str, SaveProgression] = {
    "good": GOOD_SAVE_PROGRESSION,
    "poor": POOR_SAVE_PROGRESSION,
}

ATTACK_PROGRESSIONS: dict[str, AttackProgression] = {
    "poor": POOR_BAB_PROGRESSION,
    "average": AVERAGE_BAB_PROGRESSION,
    "good": GOOD_BAB_PROGRESSION,
}


def value_at_level(table: SaveProgression | AttackProgression, level: int) -> float:
    """
    Look up the fractional bonus a progression gives at a character level.

    Args:
        table: A save or attack progression
        level: Character level (0 or more)

    Returns:
        initial + level * increment for save progressions,
        level * multiplier for attack progressions

    Raises:
        ValueError: If level is negative
        TypeError: If table is not a known progression type

    Examples:
        >>> value_at_level(GOOD_SAVE_PROGRESSION, 2)
        3.0
        >>> value_at_level(AVERAGE_BAB_PROGRESSION, 4)
        3.0
    """
    if level < 0:
        raise ValueError(f"Level must not be negative: {level}")

    if isinstance(table, SaveProgression):
        return table.initial + level * table.increment
    if isinstance(table, AttackProgression):
        return level * table.multiplier

    raise TypeError(f"Unknown progression type: {type(table).__name__}")


def bonus_at_level(table: SaveProgression | AttackProgression, level: int) -> int:
    """Integer bonus at a level: the fractional value rounded down."""
    return math.floor(value_at_level(table, level))
