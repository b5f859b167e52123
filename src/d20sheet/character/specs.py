"""
Serialized character records for d20sheet.

Defines the exchange shape of abilities, saves and characters and the
validation boundary every record passes through before an engine object is
built from it.
"""

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = structlog.get_logger(__name__)


class CharacterSpecError(Exception):
    """Raised when a serialized character record is malformed."""

    pass


class MissingFieldError(CharacterSpecError):
    """Raised when a required field or slot is absent from a record."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class AbilitySpec(BaseModel):
    """
    Serialized ability score.

    Attributes:
        base: Rolled or bought score (required)
        racial_bonus: Racial adjustment (serialized as racialBonus)
        level_bonus: Bonus gained at each character level (serialized as levelBonus)
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    base: int = Field(..., description="Base ability score")
    racial_bonus: int = Field(default=0, alias="racialBonus", description="Racial adjustment")
    level_bonus: dict[int, int] = Field(
        default_factory=dict,
        alias="levelBonus",
        description="Maps character level to the bonus gained at that level",
    )


class SaveSpec(BaseModel):
    """
    Serialized saving throw.

    Attributes:
        class_bonus: Resolved class/level bonus (serialized as classBonus)
        misc_bonus: Any other bonus (serialized as miscBonus)
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    class_bonus: int = Field(..., alias="classBonus", description="Class/level bonus")
    misc_bonus: int = Field(default=0, alias="miscBonus", description="Miscellaneous bonus")


class AbilitySpecs(BaseModel):
    """The six ability slots of a serialized character."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    strength: AbilitySpec = Field(..., alias="STR")
    dexterity: AbilitySpec = Field(..., alias="DEX")
    constitution: AbilitySpec = Field(..., alias="CON")
    intelligence: AbilitySpec = Field(..., alias="INT")
    wisdom: AbilitySpec = Field(..., alias="WIS")
    charisma: AbilitySpec = Field(..., alias="CHA")


class SaveSpecs(BaseModel):
    """The three save slots of a serialized character."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fortitude: SaveSpec = Field(..., alias="FORT")
    reflex: SaveSpec = Field(..., alias="REFL")
    will: SaveSpec = Field(..., alias="WILL")


class CharacterSpec(BaseModel):
    """A complete serialized character."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., description="Character name")
    abilities: AbilitySpecs
    saves: SaveSpecs


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _spec_error(model: type[BaseModel], e: ValidationError) -> CharacterSpecError:
    for error in e.errors():
        if error["type"] == "missing":
            field = _field_path(error["loc"])
            logger.warning("character_spec_missing_field", spec=model.__name__, field=field)
            return MissingFieldError(field)

    logger.warning("character_spec_invalid", spec=model.__name__, errors=e.error_count())
    return CharacterSpecError(f"Invalid {model.__name__}: {e}")


def parse_spec(model: type[BaseModel], data: Any) -> Any:
    """
    Validate a raw record against one of the record models.

    Args:
        model: The record model class (AbilitySpec, SaveSpec or CharacterSpec)
        data: Raw record, typically a dict decoded from JSON or YAML

    Returns:
        The validated record

    Raises:
        MissingFieldError: If any required field or slot is absent
        CharacterSpecError: If the record is malformed in any other way
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise _spec_error(model, e) from e


def parse_spec_json(model: type[BaseModel], text: str | bytes) -> Any:
    """Validate a JSON document against one of the record models."""
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        raise _spec_error(model, e) from e
