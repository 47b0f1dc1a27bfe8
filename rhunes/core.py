"""
Rhunes Core Engine

Greedy longest-match transliteration between Latin text and Rhunes.
Both directions scan left to right with bounded lookahead and never
fail: anything outside the tables is copied through unchanged.
"""

import logging
from typing import Optional, Union

from .tables import DEFAULT_TABLES, UPPERCASE_FOLDS, Direction, RuneTables

logger = logging.getLogger(__name__)


def _fold(char: str) -> str:
    """Lowercase ASCII letters and the accented table keys; leave anything else alone."""
    if char.isascii():
        return char.lower()
    return UPPERCASE_FOLDS.get(char, char)


class RuneTranslator:
    """
    Transliteration engine over a fixed set of RuneTables.

    Holds no state besides the tables, so one instance may be shared
    freely between callers.
    """

    def __init__(self, tables: Optional[RuneTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def encode(self, text: str) -> str:
        """
        Transliterate Latin text to Rhunes.

        Two-character rules win over one-character rules, which win over
        the base alphabet. Matching is case-insensitive for ASCII
        letters and the accented keys of the tables.

        Args:
            text: Latin input.

        Returns:
            The Rhunes text.
        """
        special = self.tables.special_rules
        base = self.tables.latin_to_rune
        result = []
        i = 0

        while i < len(text):
            char = text[i]
            lower = _fold(char)

            if i + 1 < len(text):
                pair = lower + _fold(text[i + 1])
                if pair in special:
                    result.append(special[pair])
                    i += 2
                    continue

            if lower in special:
                result.append(special[lower])
            elif lower in base:
                rune = base[lower]
                # Runes are caseless; upper() only matters for cased glyphs
                result.append(rune.upper() if char.isascii() and char.isupper() else rune)
            else:
                result.append(char)
            i += 1

        output = "".join(result)
        logger.debug("encode: %d chars -> %d chars", len(text), len(output))
        return output

    def decode(self, text: str) -> str:
        """
        Transliterate Rhunes back to Latin text.

        Lossy where several spellings share a rune sequence: "sk" and "sj"
        both come back as "sk", "c" and "q" come back as "k".

        Args:
            text: Rhunes input.

        Returns:
            The canonical lowercase Latin reading.
        """
        reverse = self.tables.reverse_special_rules
        base = self.tables.rune_to_latin
        longest = self.tables.max_reverse_length
        result = []
        i = 0

        while i < len(text):
            for length in range(min(longest, len(text) - i), 0, -1):
                chunk = text[i:i + length]
                if chunk in reverse:
                    result.append(reverse[chunk])
                    i += length
                    break
            else:
                char = text[i]
                result.append(base.get(char, char))
                i += 1

        output = "".join(result)
        logger.debug("decode: %d chars -> %d chars", len(text), len(output))
        return output

    def translate(self, text: str, direction: Union[Direction, bool] = Direction.FORWARD) -> str:
        """
        Run encode or decode depending on the direction.

        Args:
            text: Input text.
            direction: A Direction, or the reverse flag (True means decode).

        Returns:
            The transliterated text.

        Raises:
            ValueError: If direction is neither a Direction nor a bool.
        """
        if isinstance(direction, bool):
            direction = Direction.from_flag(direction)
        elif not isinstance(direction, Direction):
            raise ValueError(f"Unknown direction: {direction!r}")

        if direction is Direction.REVERSE:
            return self.decode(text)
        return self.encode(text)

    def alphabet(self) -> dict:
        """Return the base letters and special rules for display."""
        return {
            "Letters": dict(self.tables.latin_to_rune),
            "Special rules": dict(self.tables.special_rules),
        }


_default_translator = RuneTranslator()


def encode(text: str) -> str:
    """Latin -> Rhunes using the default tables."""
    return _default_translator.encode(text)


def decode(text: str) -> str:
    """Rhunes -> Latin using the default tables."""
    return _default_translator.decode(text)


def translate(text: str, direction: Union[Direction, bool] = Direction.FORWARD) -> str:
    """Encode or decode with the default tables."""
    return _default_translator.translate(text, direction)
