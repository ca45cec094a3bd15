"""
Tag and query text normalization.

Turns free text into lowercase word tokens with light suffix stemming so
that "Drums", "drums," and "drum" all compare equal.
"""

import re

# Checked in order; only the first applicable suffix is stripped
STEM_SUFFIXES: tuple[str, ...] = ("s", "es", "ing", "ed")

_WORD_SEPARATORS = re.compile(r"[\s,]+")


def stem_word(word: str) -> str:
    """Strip at most one common suffix from a lowercase word.

    A suffix is only stripped when the remaining stem is longer than
    len(suffix) + 2, so short words like "bass" or "as" stay intact.

    Args:
        word: Lowercase token

    Returns:
        Stemmed token (or the token unchanged)
    """
    for suffix in STEM_SUFFIXES:
        if word.endswith(suffix):
            stem = word[: -len(suffix)]
            if len(stem) > len(suffix) + 2:
                return stem
    return word


def normalize_words(text: str) -> list[str]:
    """Split free text into normalized word tokens.

    Splits on runs of whitespace and commas, drops empty tokens,
    lowercases, then stems each token. Order and duplicates are kept.

    Args:
        text: Query text or a single tag label

    Returns:
        List of normalized tokens (empty for empty input)
    """
    if not text:
        return []

    words = (word.strip() for word in _WORD_SEPARATORS.split(text))
    return [stem_word(word.lower()) for word in words if word]
