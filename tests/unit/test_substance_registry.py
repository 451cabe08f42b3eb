"""Tests for the banned substance registry."""

import pytest

from constants import BANNED_SUBSTANCES
from services.label_analysis import get_substance_registry, substance_category
from services.label_analysis.substance_matcher import is_e_code


EXPECTED_NAMES = [
    "Potassium bromate",
    "Brominated vegetable oil",
    "Azodicarbonamide",
    "Tertiary butylhydroquinone",
    "Butylated hydroxyanisole",
    "Butylated hydroxytoluene",
    "Yellow #5",
    "Yellow #6",
    "Red #40",
    "Blue #1",
    "Blue #2",
    "Green #3",
    "Potassium iodate",
    "Cyclamates",
    "Olestra",
    "rBGH",
]


def test_registry_order_is_stable():
    assert [entry.name for entry in get_substance_registry()] == EXPECTED_NAMES


def test_registry_is_cached():
    assert get_substance_registry() is get_substance_registry()


def test_alias_mapping_is_read_only():
    with pytest.raises(TypeError):
        BANNED_SUBSTANCES["Caffeine"] = ("caffeine",)


def test_canonical_names_are_unique():
    names = [entry.name for entry in get_substance_registry()]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("name,category", [
    ("Potassium bromate", "preservative"),
    ("Butylated hydroxytoluene", "preservative"),
    ("Yellow #5", "colorant"),
    ("Green #3", "colorant"),
    ("Olestra", "other"),
    ("rBGH", "other"),
])
def test_substance_category(name, category):
    assert substance_category(name) == category


def test_unknown_substance_has_no_category():
    assert substance_category("Caffeine") is None


def test_e_numbers_listed_with_and_without_hyphen():
    for entry in get_substance_registry():
        codes = {alias.upper() for alias in entry.aliases if is_e_code(alias)}
        plain = {c for c in codes if "-" not in c}
        hyphenated = {c.replace("-", "") for c in codes if "-" in c}
        assert plain == hyphenated, entry.name


def test_potassium_bromate_aliases():
    aliases = BANNED_SUBSTANCES["Potassium bromate"]
    assert "E924" in aliases
    assert "E-924" in aliases
    assert "potassium bromate" in aliases


def test_colorants_carry_fdc_and_colour_index_names():
    aliases = BANNED_SUBSTANCES["Red #40"]
    assert "FD&C Red No. 40" in aliases
    assert "CI 16035" in aliases
    assert "allura red" in aliases
