"""Character abilities, saves, class progressions and the character sheet."""

from .ability import ABILITY_NAMES, Ability, AbilityName, get_modifier
from .classes import (
    WARRIOR,
    CharacterClass,
    ClassLoadError,
    ClassValidationError,
    load_classes,
)
from .progression import (
    ATTACK_PROGRESSIONS,
    AVERAGE_BAB_PROGRESSION,
    GOOD_BAB_PROGRESSION,
    GOOD_SAVE_PROGRESSION,
    POOR_BAB_PROGRESSION,
    POOR_SAVE_PROGRESSION,
    SAVE_PROGRESSIONS,
    AttackProgression,
    SaveProgression,
    bonus_at_level,
    value_at_level,
)
from .saves import SAVE_ABILITIES, SAVE_NAMES, Save, SaveName
from .sheet import Abilities, Character, Saves
from .specs import (
    AbilitySpec,
    CharacterSpec,
    CharacterSpecError,
    MissingFieldError,
    SaveSpec,
)

__all__ = [
    "ABILITY_NAMES",
    "ATTACK_PROGRESSIONS",
    "AVERAGE_BAB_PROGRESSION",
    "Abilities",
    "Ability",
    "AbilityName",
    "AbilitySpec",
    "AttackProgression",
    "Character",
    "CharacterClass",
    "CharacterSpec",
    "CharacterSpecError",
    "ClassLoadError",
    "ClassValidationError",
    "GOOD_BAB_PROGRESSION",
    "GOOD_SAVE_PROGRESSION",
    "MissingFieldError",
    "POOR_BAB_PROGRESSION",
    "POOR_SAVE_PROGRESSION",
    "SAVE_ABILITIES",
    "SAVE_NAMES",
    "SAVE_PROGRESSIONS",
    "Save",
    "SaveName",
    "SaveProgression",
    "SaveSpec",
    "Saves",
    "WARRIOR",
    "bonus_at_level",
    "get_modifier",
    "load_classes",
    "value_at_level",
]
