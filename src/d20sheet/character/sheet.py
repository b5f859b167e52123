"""
Character sheet for d20sheet.

A Character owns six abilities and three saves. Each save is bound to its
ability (FORT to CON, REFL to DEX, WILL to WIS) once, at construction.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from .ability import Ability, AbilityName
from .saves import SAVE_ABILITIES, Save, SaveName
from .specs import (
    AbilitySpecs,
    CharacterSpec,
    SaveSpecs,
    parse_spec,
    parse_spec_json,
)

logger = structlog.get_logger(__name__)

_ABILITY_FIELDS: dict[AbilityName, str] = {
    AbilityName.STRENGTH: "strength",
    AbilityName.DEXTERITY: "dexterity",
    AbilityName.CONSTITUTION: "constitution",
    AbilityName.INTELLIGENCE: "intelligence",
    AbilityName.WISDOM: "wisdom",
    AbilityName.CHARISMA: "charisma",
}

_SAVE_FIELDS: dict[SaveName, str] = {
    SaveName.FORTITUDE: "fortitude",
    SaveName.REFLEX: "reflex",
    SaveName.WILL: "will",
}


@dataclass(frozen=True)
class Abilities:
    """The six ability slots of a character."""

    strength: Ability
    dexterity: Ability
    constitution: Ability
    intelligence: Ability
    wisdom: Ability
    charisma: Ability

    def __getitem__(self, name: AbilityName | str) -> Ability:
        return getattr(self, _ABILITY_FIELDS[AbilityName(name)])

    def items(self) -> list[tuple[AbilityName, Ability]]:
        return [(name, self[name]) for name in AbilityName]


@dataclass(frozen=True)
class Saves:
    """The three save slots of a character."""

    fortitude: Save
    reflex: Save
    will: Save

    def __getitem__(self, name: SaveName | str) -> Save:
        return getattr(self, _SAVE_FIELDS[SaveName(name)])

    def items(self) -> list[tuple[SaveName, Save]]:
        return [(name, self[name]) for name in SaveName]


class Character:
    """
    A player character's abilities and saving throws.

    Attributes:
        name: Character name
        abilities: The six abilities (STR, DEX, CON, INT, WIS, CHA)
        saves: The three saves (FORT, REFL, WILL)
    """

    def __init__(self, name: str, abilities: AbilitySpecs, saves: SaveSpecs) -> None:
        self.name = name
        self._abilities = Abilities(
            **{
                field: Ability.from_spec(getattr(abilities, field))
                for field in _ABILITY_FIELDS.values()
            }
        )
        self._saves = Saves(
            **{
                field: Save.from_spec(
                    getattr(saves, field), self._abilities[SAVE_ABILITIES[save]]
                )
                for save, field in _SAVE_FIELDS.items()
            }
        )

        logger.debug("character_constructed", name=name)

    @classmethod
    def from_spec(cls, spec: CharacterSpec) -> "Character":
        """Build a character from a validated record."""
        return cls(spec.name, spec.abilities, spec.saves)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Character":
        """
        Build a character from a raw serialized record.

        Args:
            data: {"name", "abilities": {STR..CHA}, "saves": {FORT, REFL, WILL}}

        Returns:
            The constructed Character

        Raises:
            MissingFieldError: If name, any ability or save slot, or any
                required field within a slot is absent
            CharacterSpecError: If the record is malformed in any other way
        """
        return cls.from_spec(parse_spec(CharacterSpec, data))

    @classmethod
    def from_json(cls, text: str | bytes) -> "Character":
        """Build a character from a JSON document of the serialized shape."""
        return cls.from_spec(parse_spec_json(CharacterSpec, text))

    @property
    def abilities(self) -> Abilities:
        return self._abilities

    @property
    def saves(self) -> Saves:
        return self._saves

    def ability(self, name: AbilityName | str) -> Ability:
        """Get an ability by name (e.g., AbilityName.DEXTERITY or "DEX")."""
        return self._abilities[name]

    def save(self, name: SaveName | str) -> Save:
        """Get a save by name (e.g., SaveName.REFLEX or "REFL")."""
        return self._saves[name]

    def to_spec(self) -> CharacterSpec:
        return CharacterSpec(
            name=self.name,
            abilities=AbilitySpecs(
                **{
                    field: self._abilities[ability].to_spec()
                    for ability, field in _ABILITY_FIELDS.items()
                }
            ),
            saves=SaveSpecs(
                **{field: self._saves[save].to_spec() for save, field in _SAVE_FIELDS.items()}
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the exchange shape; derived values are not included."""
        return self.to_spec().model_dump(by_alias=True)

    def to_json(self) -> str:
        """Serialize to a JSON document of the exchange shape."""
        return self.to_spec().model_dump_json(by_alias=True)

    def __repr__(self) -> str:
        return f"Character(name={self.name!r})"
