# Test fixtures
from .sample_texts import (
    SWEDISH_SENTENCE,
    SWEDISH_RHUNES,
    SWEDISH_READING,
    ENGLISH_SENTENCE,
    ENGLISH_RHUNES,
    ENGLISH_READING,
    BASE_ALPHABET,
    SHARED_RUNE_LETTERS,
    SPECIAL_RULES,
    PASSTHROUGH_CHARACTERS,
)

__all__ = [
    "SWEDISH_SENTENCE",
    "SWEDISH_RHUNES",
    "SWEDISH_READING",
    "ENGLISH_SENTENCE",
    "ENGLISH_RHUNES",
    "ENGLISH_READING",
    "BASE_ALPHABET",
    "SHARED_RUNE_LETTERS",
    "SPECIAL_RULES",
    "PASSTHROUGH_CHARACTERS",
]
