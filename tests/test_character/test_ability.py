"""Tests for ability scores and modifiers."""

import pytest

from d20sheet.character.ability import ABILITY_NAMES, Ability, AbilityName, get_modifier
from d20sheet.character.specs import CharacterSpecError, MissingFieldError


class TestGetModifier:
    """Tests for the d20-style modifier calculation."""

    def test_modifier_average_value(self):
        """Scores 10 and 11 give no modifier."""
        assert get_modifier(10) == 0
        assert get_modifier(11) == 0

    def test_modifier_high_values(self):
        """Test modifiers for high scores."""
        assert get_modifier(12) == 1
        assert get_modifier(18) == 4
        assert get_modifier(20) == 5
        assert get_modifier(30) == 10

    def test_modifier_low_values(self):
        """Test modifiers for low scores."""
        assert get_modifier(8) == -1
        assert get_modifier(7) == -2
        assert get_modifier(6) == -2
        assert get_modifier(1) == -5

    def test_modifier_negative_scores_round_down(self):
        """Negative scores use floor division, not truncation."""
        assert get_modifier(0) == -5
        assert get_modifier(-1) == -6
        assert get_modifier(-2) == -6
        assert get_modifier(-3) == -7

    def test_modifier_formula(self):
        """Verify modifier follows score // 2 - 5."""
        for score in range(-10, 31):
            assert get_modifier(score) == score // 2 - 5


class TestAbilityScore:
    """Tests for derived ability scores."""

    def test_base_only(self):
        """Score equals base when there are no bonuses."""
        ability = Ability(14)
        assert ability.score == 14
        assert ability.modifier == 2

    def test_racial_bonus(self):
        """Racial bonus adds to the score."""
        ability = Ability(18, racial_bonus=2)
        assert ability.score == 20
        assert ability.modifier == 5

    def test_level_bonuses(self):
        """Every level bonus adds to the score."""
        ability = Ability(15, racial_bonus=-2, level_bonus={4: 1, 8: 1, 12: 1})
        assert ability.score == 16
        assert ability.modifier == 3

    def test_score_recomputed_after_mutation(self):
        """Score and modifier follow changes to the inputs."""
        ability = Ability(10)
        assert ability.modifier == 0

        ability.base = 12
        assert ability.score == 12
        assert ability.modifier == 1

        ability.level_bonus[4] = 1
        assert ability.score == 13

        ability.racial_bonus = -4
        assert ability.score == 9
        assert ability.modifier == -1

    def test_level_bonus_is_copied(self):
        """The level bonus mapping passed in is not aliased."""
        level_bonus = {4: 1}
        ability = Ability(10, level_bonus=level_bonus)

        level_bonus[8] = 1
        assert ability.score == 11
        assert ability.level_bonus == {4: 1}


class TestAbilitySerialization:
    """Tests for building abilities from records and serializing them."""

    def test_from_dict_defaults(self):
        """racialBonus and levelBonus default to 0 and empty."""
        ability = Ability.from_dict({"base": 12})
        assert ability.racial_bonus == 0
        assert ability.level_bonus == {}
        assert ability.score == 12

    def test_from_dict_full(self):
        """All fields are read from the record."""
        ability = Ability.from_dict({"base": 16, "racialBonus": 2, "levelBonus": {4: 1}})
        assert ability.base == 16
        assert ability.racial_bonus == 2
        assert ability.level_bonus == {4: 1}
        assert ability.score == 19

    def test_from_dict_copies_level_bonus(self):
        """The record's levelBonus mapping is not shared with the ability."""
        record = {"base": 10, "levelBonus": {4: 1}}
        ability = Ability.from_dict(record)

        ability.level_bonus[8] = 1
        assert record["levelBonus"] == {4: 1}

    def test_to_dict_shape(self):
        """Serialized form matches the constructor input shape."""
        ability = Ability(18, racial_bonus=2, level_bonus={4: 1})
        assert ability.to_dict() == {"base": 18, "racialBonus": 2, "levelBonus": {4: 1}}

    def test_round_trip(self):
        """A full record survives from_dict then to_dict unchanged."""
        record = {"base": 7, "racialBonus": -2, "levelBonus": {4: 1, 8: 1}}
        assert Ability.from_dict(record).to_dict() == record

    def test_missing_base(self):
        """A record without base fails instead of defaulting to 0."""
        with pytest.raises(MissingFieldError) as exc_info:
            Ability.from_dict({"racialBonus": 2})
        assert exc_info.value.field == "base"

    def test_malformed_base(self):
        """A non-numeric base is rejected."""
        with pytest.raises(CharacterSpecError):
            Ability.from_dict({"base": "eighteen"})


class TestAbilityNames:
    """Tests for the ability name enum."""

    def test_slot_order(self):
        """Ability keys are listed in sheet order."""
        assert ABILITY_NAMES == ["STR", "DEX", "CON", "INT", "WIS", "CHA"]

    def test_lookup_by_key(self):
        """Enum members are found by their serialized key."""
        assert AbilityName("DEX") is AbilityName.DEXTERITY
        assert AbilityName.WISDOM == "WIS"
