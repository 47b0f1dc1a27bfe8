"""
Fixed lookup tables for Latin <-> Rhunes transliteration.

Built once at import and never modified afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Direction(Enum):
    """Direction of a transliteration."""
    FORWARD = "encode"  # Latin -> Rhunes
    REVERSE = "decode"  # Rhunes -> Latin

    @classmethod
    def from_flag(cls, reverse: bool) -> "Direction":
        """Map the CLI-style reverse flag onto a direction."""
        return cls.REVERSE if reverse else cls.FORWARD


# Base alphabet, position for position. 'x' is a special rule, not a letter.
LATIN_LETTERS = "abcdefghijklmnopqrstuvwyz"
RHUNE_LETTERS = "ᚨᛒᚲᛞᛖᚠᚷᚺᛁᛃᚲᛚᛗᚾᛟᛈᚲᚱᛊᛏᚢᚢᚹᛁᛉ"

# Runes shared by several letters decode to one canonical letter.
CANONICAL_LETTERS = {
    "ᚲ": "k",  # c, k, q
    "ᚢ": "u",  # u, v
    "ᛁ": "i",  # i, y
}

# Latin key -> rune sequence, tried before the base alphabet.
SPECIAL_RULES = {
    "ä": "ᛇ",
    "ö": "ᛟᛖ",
    "ü": "ᚢᛖ",
    "å": "ᚨᚨ",
    "ø": "ᚢᚢ",
    "æ": "ᛇᛇ",
    "th": "ᚦ",
    "sk": "ᚺᚱᚲ",
    "sj": "ᚺᚱᚲ",
    "x": "ᚲᛊ",
    "ng": "ᛜ",
    "þ": "ᚦ",
    "ð": "ᚦ",
}

# Uppercase forms of the accented keys. Everything else folds by ASCII rules only.
UPPERCASE_FOLDS = {
    "Ä": "ä",
    "Ö": "ö",
    "Ü": "ü",
    "Å": "å",
    "Ø": "ø",
    "Æ": "æ",
    "Þ": "þ",
    "Ð": "ð",
}

# Rune sequence -> canonical Latin text. Forward rules that share a rune
# sequence (sk/sj, th/þ/ð) only get one entry here.
REVERSE_SPECIAL_RULES = {
    "ᛇ": "ae",
    "ᛟᛖ": "oe",
    "ᚢᛖ": "ue",
    "ᚨᚨ": "aa",
    "ᚢᚢ": "uu",
    "ᛇᛇ": "aeae",
    "ᚦ": "th",
    "ᚺᚱᚲ": "sk",
    "ᚲᛊ": "x",
    "ᛜ": "ng",
}


@dataclass(frozen=True)
class RuneTables:
    """
    The four lookup structures used by the engine.

    Instances are immutable and safe to share between threads.
    """
    latin_to_rune: Mapping[str, str]
    rune_to_latin: Mapping[str, str]
    special_rules: Mapping[str, str]
    reverse_special_rules: Mapping[str, str]

    def __post_init__(self):
        for letter, rune in self.latin_to_rune.items():
            if len(letter) != 1 or len(rune) != 1:
                raise ValueError(f"Base mapping must be one character each way, got {letter!r} -> {rune!r}")
            if rune not in self.rune_to_latin:
                raise ValueError(f"Rune {rune!r} for {letter!r} has no reverse mapping")
        for key, runes in self.special_rules.items():
            if not 1 <= len(key) <= 2:
                raise ValueError(f"Special rule keys must be 1-2 characters, got {key!r}")
            if not 1 <= len(runes) <= 3:
                raise ValueError(f"Special rule {key!r} must map to 1-3 runes, got {runes!r}")
            if runes not in self.reverse_special_rules:
                raise ValueError(f"Special rule {key!r} has no reverse rule for {runes!r}")
        for runes in self.reverse_special_rules:
            if runes not in self.special_rules.values():
                raise ValueError(f"Reverse rule {runes!r} has no forward rule")

    @property
    def max_reverse_length(self) -> int:
        """Length of the longest rune sequence in the reverse rules."""
        return max((len(runes) for runes in self.reverse_special_rules), default=0)


def build_tables() -> RuneTables:
    """
    Build the lookup tables from the literal definitions above.

    Returns:
        A fresh, read-only RuneTables instance.

    Raises:
        ValueError: If the literal tables are inconsistent.
    """
    if len(LATIN_LETTERS) != len(RHUNE_LETTERS):
        raise ValueError(
            f"Alphabet length mismatch: {len(LATIN_LETTERS)} letters, {len(RHUNE_LETTERS)} runes"
        )

    latin_to_rune = dict(zip(LATIN_LETTERS, RHUNE_LETTERS))

    rune_to_latin = {}
    for letter, rune in latin_to_rune.items():
        rune_to_latin.setdefault(rune, letter)
    rune_to_latin.update(CANONICAL_LETTERS)

    return RuneTables(
        latin_to_rune=MappingProxyType(latin_to_rune),
        rune_to_latin=MappingProxyType(rune_to_latin),
        special_rules=MappingProxyType(dict(SPECIAL_RULES)),
        reverse_special_rules=MappingProxyType(dict(REVERSE_SPECIAL_RULES)),
    )


DEFAULT_TABLES = build_tables()
