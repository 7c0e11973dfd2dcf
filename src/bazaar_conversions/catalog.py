from types import MappingProxyType

ITEMS_API_URL = "https://api.hypixel.net/v2/resources/skyblock/items"
BAZAAR_API_URL = "https://api.hypixel.net/v2/skyblock/bazaar"

OUTPUT_FILE_NAME = "bazaar-conversions.json"

STARRED_GLYPH = "⚚"

# gem type -> glyph shown in front of every gemstone tier
GEM_GLYPHS = {
    "AMBER": "⸕",
    "AMETHYST": "❈",
    "AQUAMARINE": "☂",
    "CITRINE": "☘",
    "JADE": "☘",
    "JASPER": "❁",
    "ONYX": "☠",
    "OPAL": "❂",
    "PERIDOT": "☘",
    "RUBY": "❤",
    "SAPPHIRE": "✎",
    "TOPAZ": "✧",
}
GEM_TIERS = ("ROUGH", "FLAWED", "FINE", "FLAWLESS", "PERFECT")

# Manual overrides for ids whose item name is missing or reads badly
_OVERRIDES = {
    # Duplex
    "ENCHANTMENT_ULTIMATE_REITERATE_1": "Duplex I",
    "ENCHANTMENT_ULTIMATE_REITERATE_2": "Duplex II",
    "ENCHANTMENT_ULTIMATE_REITERATE_3": "Duplex III",
    "ENCHANTMENT_ULTIMATE_REITERATE_4": "Duplex IV",
    "ENCHANTMENT_ULTIMATE_REITERATE_5": "Duplex V",

    # Turbo Cactus (Cacti)
    "ENCHANTMENT_TURBO_CACTUS_1": "Turbo-Cacti I",
    "ENCHANTMENT_TURBO_CACTUS_2": "Turbo-Cacti II",
    "ENCHANTMENT_TURBO_CACTUS_3": "Turbo-Cacti III",
    "ENCHANTMENT_TURBO_CACTUS_4": "Turbo-Cacti IV",
    "ENCHANTMENT_TURBO_CACTUS_5": "Turbo-Cacti V",

    # ultimates that keep "Ultimate" in the name
    "ENCHANTMENT_ULTIMATE_WISE_1": "Ultimate Wise I",
    "ENCHANTMENT_ULTIMATE_WISE_2": "Ultimate Wise II",
    "ENCHANTMENT_ULTIMATE_WISE_3": "Ultimate Wise III",
    "ENCHANTMENT_ULTIMATE_WISE_4": "Ultimate Wise IV",
    "ENCHANTMENT_ULTIMATE_WISE_5": "Ultimate Wise V",

    "ENCHANTMENT_ULTIMATE_JERRY_1": "Ultimate Jerry I",
    "ENCHANTMENT_ULTIMATE_JERRY_2": "Ultimate Jerry II",
    "ENCHANTMENT_ULTIMATE_JERRY_3": "Ultimate Jerry III",
    "ENCHANTMENT_ULTIMATE_JERRY_4": "Ultimate Jerry IV",
    "ENCHANTMENT_ULTIMATE_JERRY_5": "Ultimate Jerry V",

    # Ingots
    "ENCHANTED_IRON": "Enchanted Iron Ingot",
    "ENCHANTED_GOLD": "Enchanted Gold Ingot",
}

# Gemstones: ROUGH_AMBER_GEM -> "⸕ Rough Amber Gemstone", ...
for _tier in GEM_TIERS:
    for _gem, _glyph in GEM_GLYPHS.items():
        _OVERRIDES[f"{_tier}_{_gem}_GEM"] = f"{_glyph} {_tier.title()} {_gem.title()} Gemstone"

NAME_OVERRIDES = MappingProxyType(_OVERRIDES)
