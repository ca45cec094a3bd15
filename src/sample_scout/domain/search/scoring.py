"""
Tag match scoring.

A whole-word tag hit is much stronger evidence than a substring hit, so
exact matches weigh 4x partial ones.
"""

from typing import Iterable, Sequence

from .normalize import normalize_words

EXACT_MATCH_WEIGHT = 2.0
PARTIAL_MATCH_WEIGHT = 0.5


def build_tag_vocabulary(tags: Iterable[str]) -> set[str]:
    """Normalize every tag (tags may be multi-word) into one set of tokens."""
    vocabulary: set[str] = set()
    for tag in tags:
        vocabulary.update(normalize_words(tag))
    return vocabulary


def count_matches(
    vocabulary: set[str], query_words: Sequence[str]
) -> tuple[int, int]:
    """Count exact and partial-only matches of query words against a vocabulary.

    Repeated query words count once per occurrence.

    Returns:
        (exact_count, partial_count)
    """
    exact_count = 0
    partial_count = 0

    for word in query_words:
        if word in vocabulary:
            exact_count += 1
        elif any(word in tag_word for tag_word in vocabulary):
            # Not an exact hit, so any containing tag word is strictly longer
            partial_count += 1

    return exact_count, partial_count


def score(tags: Iterable[str], query_words: Sequence[str]) -> float:
    """Score how well a sound's tags match a normalized query.

    Args:
        tags: Tag labels (raw, not yet normalized)
        query_words: Output of normalize_words() for the query

    Returns:
        exact_count * 2 + partial_count * 0.5 (0 for empty tags or query)
    """
    if not query_words:
        return 0.0

    vocabulary = build_tag_vocabulary(tags)
    if not vocabulary:
        return 0.0

    exact_count, partial_count = count_matches(vocabulary, query_words)
    return exact_count * EXACT_MATCH_WEIGHT + partial_count * PARTIAL_MATCH_WEIGHT
