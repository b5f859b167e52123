"""Ability scores and modifiers for d20sheet.

This module provides the six core abilities, their derived scores, and the
d20-style modifier calculation.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from .specs import AbilitySpec, parse_spec


class AbilityName(StrEnum):
    """Core character abilities, valued by their serialized key."""

    STRENGTH = "STR"
    DEXTERITY = "DEX"
    CONSTITUTION = "CON"
    INTELLIGENCE = "INT"
    WISDOM = "WIS"
    CHARISMA = "CHA"


# Constant ability keys in slot order
ABILITY_NAMES = [ability.value for ability in AbilityName]


def get_modifier(score: int) -> int:
    """Calculate the d20-style ability modifier.

    Args:
        score: The ability score (typically 1-30, may be negative)

    Returns:
        The modifier: score // 2 - 5 (floor division, also for negative scores)

    Examples:
        >>> get_modifier(10)
        0
        >>> get_modifier(20)
        5
        >>> get_modifier(7)
        -2
        >>> get_modifier(-1)
        -6
    """
    return score // 2 - 5


class Ability:
    """
    A single ability score.

    The score and modifier are derived on every access from the base score,
    the racial bonus and the bonuses gained at each level.

    Attributes:
        base: Rolled or bought score
        racial_bonus: Racial adjustment
        level_bonus: Maps character level to the bonus gained at that level
    """

    def __init__(
        self,
        base: int,
        racial_bonus: int = 0,
        level_bonus: Mapping[int, int] | None = None,
    ) -> None:
        self.base = base
        self.racial_bonus = racial_bonus
        self.level_bonus: dict[int, int] = dict(level_bonus or {})

    @classmethod
    def from_spec(cls, spec: AbilitySpec) -> "Ability":
        """Build an ability from a validated record."""
        return cls(spec.base, spec.racial_bonus, spec.level_bonus)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Ability":
        """
        Build an ability from a raw serialized record.

        Raises:
            MissingFieldError: If base is absent
        """
        return cls.from_spec(parse_spec(AbilitySpec, data))

    @property
    def score(self) -> int:
        """Final score: base + racial bonus + all level bonuses."""
        return self.base + self.racial_bonus + sum(self.level_bonus.values())

    @property
    def modifier(self) -> int:
        """Modifier derived from the current score."""
        return get_modifier(self.score)

    def to_spec(self) -> AbilitySpec:
        return AbilitySpec(
            base=self.base,
            racial_bonus=self.racial_bonus,
            level_bonus=dict(self.level_bonus),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to {"base", "racialBonus", "levelBonus"}."""
        return self.to_spec().model_dump(by_alias=True)

    def __repr__(self) -> str:
        return (
            f"Ability(base={self.base}, racial_bonus={self.racial_bonus}, "
            f"level_bonus={self.level_bonus!r})"
        )
