import re
import roman
from .catalog import NAME_OVERRIDES, STARRED_GLYPH

ENDS_WITH_NUMBER = re.compile(r"\d$")
COLOR_CODE_PATTERN = re.compile(r"§[0-9A-FK-ORa-fk-or]")
PLACEHOLDER_PATTERN = re.compile(r"%%\w+%%")
SPACES = re.compile(r" {2,}")
# ordinals ("1st", "4th") stay whole, otherwise letters and digits split apart
WORD_PATTERN = re.compile(r"\d*(?:1st|2nd|3rd|(?![123])\dth)(?=\b|_)|[^\W\d_]+|\d+")


def _start_case(text: str) -> str:
    words = WORD_PATTERN.findall(text.lower())
    return " ".join(w[:1].upper() + w[1:] for w in words)

def _to_roman(n: int) -> str:
    if n <= 0:
        return str(n)
    try:
        return roman.toRoman(n)
    except roman.OutOfRangeError:
        return str(n)


def prettify(item_id: str) -> str:
    """
    Fallback prettifier for ids the item catalog cannot name.

    Drops the ENCHANTMENT_ prefix (and ULTIMATE_ for ultimates without an
    override), title-cases the rest and turns a trailing tier number into a
    Roman numeral: ENCHANTMENT_ULTIMATE_CHIMERA_5 -> "Chimera V".
    """
    clean_id = re.sub(r"^ENCHANTMENT_", "", item_id)
    if clean_id.startswith("ULTIMATE_") and item_id not in NAME_OVERRIDES:
        clean_id = clean_id[len("ULTIMATE_"):]

    name = _start_case(clean_id)
    if not ENDS_WITH_NUMBER.search(name):
        return name

    *words, n = name.split(" ")
    return " ".join([*words, _to_roman(int(n))])


def _move_first_word_last(name: str) -> str:
    first, _, rest = name.partition(" ")
    return f"{rest} {first}"

def _turbo(name: str) -> str:
    return f"Turbo-{name.partition(' ')[2]}"

# (predicate(id, name), transform(name)); first match wins
ID_REWRITES = (
    # "Shard Wolf" -> "Wolf Shard"
    (lambda i, n: i.startswith("SHARD_") and n.startswith("Shard "), _move_first_word_last),
    # "Turbo Wheat V" -> "Turbo-Wheat V"
    (lambda i, n: i.startswith("ENCHANTMENT_TURBO"), _turbo),
    # "Essence Wither" -> "Wither Essence"
    (lambda i, n: i.startswith("ESSENCE_") and n.startswith("Essence "), _move_first_word_last),
)


def clean_name(raw_name: str) -> str:
    name = COLOR_CODE_PATTERN.sub("", raw_name)
    name = PLACEHOLDER_PATTERN.sub("", name)
    # a removed placeholder leaves its neighbours' spaces behind
    return SPACES.sub(" ", name).strip()

def format_name(raw_name: str | None, item_id: str) -> str:
    """Display name for a bazaar product: override, cleaned catalog name, or prettified id."""
    if item_id in NAME_OVERRIDES:
        return NAME_OVERRIDES[item_id]

    if raw_name:
        cleaned = clean_name(raw_name)
        # fragged items
        if item_id.startswith("STARRED_"):
            return f"{STARRED_GLYPH} {cleaned}"
        return cleaned

    name = prettify(item_id)
    for matches, rewrite in ID_REWRITES:
        if matches(item_id, name):
            return rewrite(name)
    return name
