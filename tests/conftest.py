"""Shared fixtures for all tests."""

import copy

import pytest

from d20sheet.character import Character
from d20sheet.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


WINGBLADE = {
    "name": "Wingblade",
    "abilities": {
        # stat array: 18, 16, 15, 12, 12, 9
        "STR": {"base": 9, "racialBonus": 0, "levelBonus": {}},
        "DEX": {"base": 18, "racialBonus": 2, "levelBonus": {}},
        "CON": {"base": 15, "racialBonus": 0, "levelBonus": {}},
        "INT": {"base": 16, "racialBonus": 0, "levelBonus": {}},
        "WIS": {"base": 12, "racialBonus": 0, "levelBonus": {}},
        "CHA": {"base": 12, "racialBonus": 0, "levelBonus": {}},
    },
    "saves": {
        "FORT": {"classBonus": 0},
        "REFL": {"classBonus": 2},
        "WILL": {"classBonus": 2},
    },
}


@pytest.fixture
def wingblade_data():
    """Serialized record of the Wingblade sample character."""
    return copy.deepcopy(WINGBLADE)


@pytest.fixture
def wingblade(wingblade_data):
    """The Wingblade sample character."""
    return Character.from_dict(wingblade_data)
