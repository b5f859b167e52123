"""Saving throws for d20sheet."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from .ability import Ability, AbilityName
from .specs import SaveSpec, parse_spec


class SaveName(StrEnum):
    """Saving throws, valued by their serialized key."""

    FORTITUDE = "FORT"
    REFLEX = "REFL"
    WILL = "WILL"


SAVE_NAMES = [save.value for save in SaveName]

# Which ability each save draws its modifier from
SAVE_ABILITIES: dict[SaveName, AbilityName] = {
    SaveName.FORTITUDE: AbilityName.CONSTITUTION,
    SaveName.REFLEX: AbilityName.DEXTERITY,
    SaveName.WILL: AbilityName.WISDOM,
}


class Save:
    """
    A saving throw bound to one ability.

    The save keeps a reference to the ability, not a copy, so changes to the
    ability show up in the bonus on the next read.

    Attributes:
        class_bonus: Resolved class/level bonus
        misc_bonus: Any other bonus
    """

    def __init__(self, ability: Ability, class_bonus: int, misc_bonus: int = 0) -> None:
        self._ability = ability
        self.class_bonus = class_bonus
        self.misc_bonus = misc_bonus

    @classmethod
    def from_spec(cls, spec: SaveSpec, ability: Ability) -> "Save":
        """Build a save from a validated record, bound to the given ability."""
        return cls(ability, spec.class_bonus, spec.misc_bonus)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], ability: Ability) -> "Save":
        """
        Build a save from a raw serialized record.

        Raises:
            MissingFieldError: If classBonus is absent
        """
        return cls.from_spec(parse_spec(SaveSpec, data), ability)

    @property
    def ability(self) -> Ability:
        """The ability this save is bound to (fixed at construction)."""
        return self._ability

    @property
    def bonus(self) -> int:
        """Total bonus: ability modifier + class bonus + misc bonus."""
        return self._ability.modifier + self.class_bonus + self.misc_bonus

    def to_spec(self) -> SaveSpec:
        return SaveSpec(class_bonus=self.class_bonus, misc_bonus=self.misc_bonus)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to {"classBonus", "miscBonus"}; the ability is not included."""
        return self.to_spec().model_dump(by_alias=True)

    def __repr__(self) -> str:
        return f"Save(class_bonus={self.class_bonus}, misc_bonus={self.misc_bonus})"
