"""
Rhunes - Latin <-> runic transliterator

Character-substitution transliteration between Latin-script text and
the Rhunes alphabet, with digraph rules such as "th", "sk"/"sj" and "ng".
Anything outside the alphabet passes through unchanged.
"""

from .core import RuneTranslator, decode, encode, translate
from .tables import DEFAULT_TABLES, Direction, RuneTables, build_tables

__version__ = "0.1.0"

__all__ = [
    "RuneTranslator",
    "RuneTables",
    "Direction",
    "DEFAULT_TABLES",
    "build_tables",
    "encode",
    "decode",
    "translate",
]
