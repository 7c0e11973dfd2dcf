#!/usr/bin/env python3
"""
Tests for display-name derivation: overrides, catalog name cleanup,
the fallback prettifier and the id-prefix rewrites.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from bazaar_conversions.catalog import NAME_OVERRIDES
from bazaar_conversions.names import clean_name, format_name, prettify


def test_overrides_win_over_any_raw_name():
    for item_id, expected in NAME_OVERRIDES.items():
        assert format_name(None, item_id) == expected
        assert format_name("§aSomething Else", item_id) == expected


def test_override_table_contents():
    assert len(NAME_OVERRIDES) == 22 + 5 * 12
    assert NAME_OVERRIDES["ENCHANTMENT_ULTIMATE_REITERATE_4"] == "Duplex IV"
    assert NAME_OVERRIDES["ROUGH_AMBER_GEM"] == "⸕ Rough Amber Gemstone"
    assert NAME_OVERRIDES["PERFECT_PERIDOT_GEM"] == "☘ Perfect Peridot Gemstone"
    assert NAME_OVERRIDES["FLAWLESS_TOPAZ_GEM"] == "✧ Flawless Topaz Gemstone"
    with pytest.raises(TypeError):
        NAME_OVERRIDES["NEW_ID"] = "x"


def test_color_codes_and_placeholders_stripped():
    assert format_name("§aFancy %%NUM%% Sword", "FANCY_SWORD") == "Fancy Sword"
    assert format_name("  §l§cBold Thing §r ", "BOLD_THING") == "Bold Thing"
    # § followed by something that is not a format code is left alone
    assert clean_name("§xOdd") == "§xOdd"


def test_starred_items_get_glyph():
    assert format_name("§dHyperion", "STARRED_HYPERION") == "⚚ Hyperion"
    assert format_name("Hyperion", "HYPERION") == "Hyperion"


def test_empty_raw_name_uses_fallback():
    assert format_name("", "ESSENCE_WITHER") == "Wither Essence"


def test_shard_rewrite():
    assert prettify("SHARD_WOLF") == "Shard Wolf"
    assert format_name(None, "SHARD_WOLF") == "Wolf Shard"
    assert format_name(None, "SHARD_SEA_SERPENT") == "Sea Serpent Shard"


def test_turbo_rewrite_keeps_roman_tier():
    assert prettify("ENCHANTMENT_TURBO_WHEAT_5") == "Turbo Wheat V"
    assert format_name(None, "ENCHANTMENT_TURBO_WHEAT_5") == "Turbo-Wheat V"
    assert format_name(None, "ENCHANTMENT_TURBO_CACTUS_3") == "Turbo-Cacti III"


def test_essence_rewrite():
    assert format_name(None, "ESSENCE_DRAGON") == "Dragon Essence"


def test_no_rewrite_for_plain_ids():
    assert format_name(None, "ENCHANTED_CARROT") == "Enchanted Carrot"
    # prefix alone is not enough for shard/essence
    assert format_name(None, "SHARDED_THING") == "Sharded Thing"


def test_prettify_roman_numerals():
    assert prettify("SOME_ENCHANT_5") == "Some Enchant V"
    assert prettify("ENCHANTMENT_SHARPNESS_7") == "Sharpness VII"
    assert prettify("ENCHANTMENT_PROTECTION_10") == "Protection X"
    assert prettify("INK_SACK:3") == "Ink Sack III"


def test_prettify_non_positive_stays_literal():
    assert prettify("WEIRD_0") == "Weird 0"


def test_prettify_ultimate_prefix():
    assert prettify("ENCHANTMENT_ULTIMATE_CHIMERA_5") == "Chimera V"
    # overridden ultimates keep the word when called directly
    assert prettify("ENCHANTMENT_ULTIMATE_WISE_3") == "Ultimate Wise III"
    assert format_name(None, "ENCHANTMENT_ULTIMATE_WISE_3") == "Ultimate Wise III"


def test_prettify_without_number():
    assert prettify("ENCHANTED_RAW_FISH") == "Enchanted Raw Fish"
    assert prettify("") == ""


def test_prettify_keeps_ordinals_whole():
    assert prettify("1ST_PLACE_3") == "1st Place III"
    assert prettify("4TH_FLOOR_KEY") == "4th Floor Key"


def test_prettify_out_of_range_number_stays_literal():
    assert prettify("ITEM_5000") == "Item 5000"
