"""
Character classes for d20sheet.

A class is a named bundle of progressions. Class definitions live in a YAML
catalog; WARRIOR is also available as a constant.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import yaml

from .progression import (
    ATTACK_PROGRESSIONS,
    GOOD_BAB_PROGRESSION,
    GOOD_SAVE_PROGRESSION,
    POOR_SAVE_PROGRESSION,
    SAVE_PROGRESSIONS,
    AttackProgression,
    SaveProgression,
    bonus_at_level,
)
from .saves import SaveName

logger = structlog.get_logger(__name__)


class ClassLoadError(Exception):
    """Raised when there's an error loading class data."""

    pass


class ClassValidationError(Exception):
    """Raised when class validation fails."""

    pass


@dataclass(frozen=True)
class CharacterClass:
    """
    A character class and the progressions it grants.

    Attributes:
        name: Display name (e.g., "Warrior")
        attack_progression: Attack bonus progression
        fortitude_progression: Fortitude save progression
        reflex_progression: Reflex save progression
        will_progression: Will save progression
    """

    name: str
    attack_progression: AttackProgression
    fortitude_progression: SaveProgression
    reflex_progression: SaveProgression
    will_progression: SaveProgression

    def save_progression(self, save: SaveName | str) -> SaveProgression:
        """
        Get the progression for a save slot.

        Args:
            save: SaveName or its serialized key ("FORT", "REFL", "WILL")

        Raises:
            ValueError: If save is not a known save key
        """
        save = SaveName(save)
        if save is SaveName.FORTITUDE:
            return self.fortitude_progression
        if save is SaveName.REFLEX:
            return self.reflex_progression
        return self.will_progression

    def save_bonuses(self, level: int) -> dict[SaveName, int]:
        """Resolved class bonus for every save at the given level."""
        return {save: bonus_at_level(self.save_progression(save), level) for save in SaveName}

    def base_attack_bonus(self, level: int) -> int:
        """Resolved attack bonus at the given level."""
        return bonus_at_level(self.attack_progression, level)


WARRIOR = CharacterClass(
    name="Warrior",
    attack_progression=GOOD_BAB_PROGRESSION,
    fortitude_progression=GOOD_SAVE_PROGRESSION,
    reflex_progression=POOR_SAVE_PROGRESSION,
    will_progression=POOR_SAVE_PROGRESSION,
)


def load_yaml_file(file_path: Path) -> list[dict[str, Any]]:
    """
    Load a YAML file containing class definitions.

    Args:
        file_path: Path to the YAML file

    Returns:
        List of class dictionaries

    Raises:
        ClassLoadError: If the file cannot be loaded or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ClassLoadError(f"YAML parsing error in {file_path}: {e}") from e
    except OSError as e:
        raise ClassLoadError(f"Error reading {file_path}: {e}") from e

    if not data:
        raise ClassLoadError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict) or "classes" not in data:
        raise ClassLoadError(f"Missing 'classes' key in {file_path}")

    classes = data["classes"]
    if not isinstance(classes, list):
        raise ClassLoadError(f"'classes' must be a list in {file_path}")

    return classes


def validate_class_data(class_data: dict[str, Any], file_path: Path) -> None:
    """
    Validate that a class dictionary has all required fields.

    Args:
        class_data: Dictionary containing class data
        file_path: Path to the source file (for error messages)

    Raises:
        ClassValidationError: If required fields are missing or invalid
    """
    if not isinstance(class_data, dict):
        raise ClassValidationError(f"Class entry in {file_path} must be a mapping")

    required_fields = ["id", "name", "attack", "fortitude", "reflex", "will"]

    for field in required_fields:
        if field not in class_data:
            class_id = class_data.get("id", "unknown")
            raise ClassValidationError(
                f"Class '{class_id}' in {file_path} missing required field: {field}"
            )

    attack = str(class_data["attack"]).lower()
    if attack not in ATTACK_PROGRESSIONS:
        raise ClassValidationError(
            f"Class '{class_data['id']}' in {file_path} has invalid attack progression "
            f"'{attack}' (must be one of: {', '.join(ATTACK_PROGRESSIONS)})"
        )

    for field in ("fortitude", "reflex", "will"):
        progression = str(class_data[field]).lower()
        if progression not in SAVE_PROGRESSIONS:
            raise ClassValidationError(
                f"Class '{class_data['id']}' in {file_path} has invalid {field} progression "
                f"'{progression}' (must be one of: {', '.join(SAVE_PROGRESSIONS)})"
            )


def create_class_from_data(class_data: dict[str, Any]) -> CharacterClass:
    """Create a CharacterClass from validated YAML data."""
    return CharacterClass(
        name=class_data["name"],
        attack_progression=ATTACK_PROGRESSIONS[str(class_data["attack"]).lower()],
        fortitude_progression=SAVE_PROGRESSIONS[str(class_data["fortitude"]).lower()],
        reflex_progression=SAVE_PROGRESSIONS[str(class_data["reflex"]).lower()],
        will_progression=SAVE_PROGRESSIONS[str(class_data["will"]).lower()],
    )


def load_classes(file_path: Path | None = None) -> dict[str, CharacterClass]:
    """
    Load the class catalog.

    Args:
        file_path: Catalog to read (defaults to settings.classes_file)

    Returns:
        Dictionary mapping class IDs to CharacterClass objects

    Raises:
        ClassLoadError: If the catalog cannot be read
        ClassValidationError: If any class definition is invalid or duplicated
    """
    if file_path is None:
        from d20sheet.config import get_settings

        file_path = get_settings().classes_file

    classes: dict[str, CharacterClass] = {}

    for class_data in load_yaml_file(file_path):
        validate_class_data(class_data, file_path)

        class_id = str(class_data["id"])
        if class_id in classes:
            raise ClassValidationError(f"Duplicate class ID '{class_id}' found in {file_path}")

        classes[class_id] = create_class_from_data(class_data)

    logger.info("classes_loaded", count=len(classes), path=str(file_path))
    return classes
