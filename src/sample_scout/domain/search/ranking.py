"""
Search filtering and ranking.

Pure functions over an in-memory candidate list: no I/O, no shared state.
Every supplied filter must pass (tag score, BPM tolerance, key) for a
sound to be kept, then results are ordered by score, highest first.
"""

from dataclasses import replace
from typing import Optional, Sequence

from loguru import logger

from .models import SearchQuery, SoundRecord
from .normalize import normalize_words
from .scoring import score
from .tags import resolve_tags

DEFAULT_BPM_TOLERANCE = 5
DEFAULT_MIN_MATCH_SCORE = 2.0  # One exact tag match


def matches_bpm(
    sound_bpm: Optional[int],
    bpm_filter: Optional[int],
    tolerance: int = DEFAULT_BPM_TOLERANCE,
) -> bool:
    """True if no filter applies or the sound is within tolerance of the target."""
    if bpm_filter is None or sound_bpm is None:
        return True
    return abs(sound_bpm - bpm_filter) <= tolerance


def matches_key(sound_key: Optional[str], key_filter: Optional[str]) -> bool:
    """True if no filter applies or the keys are equal ignoring case."""
    if not key_filter or not sound_key:
        return True
    return sound_key.lower() == key_filter.lower()


def search(
    candidates: Sequence[SoundRecord],
    query: SearchQuery,
    bpm_tolerance: int = DEFAULT_BPM_TOLERANCE,
    min_match_score: float = DEFAULT_MIN_MATCH_SCORE,
) -> list[SoundRecord]:
    """Filter and rank candidate sounds for one query.

    Args:
        candidates: Full candidate set fetched by the caller
        query: Text plus optional BPM/key filters
        bpm_tolerance: Allowed BPM difference when a BPM filter is set
        min_match_score: Minimum tag score when query text is given

    Returns:
        New SoundRecord copies with match_score set, sorted by score
        descending; ties keep their input order.
    """
    query_words = normalize_words(query.text) if query.text else []

    results: list[SoundRecord] = []
    for sound in candidates:
        match_score = 0.0
        if query.text:
            match_score = score(resolve_tags(sound.tags), query_words)
            if match_score < min_match_score:
                continue

        if not matches_bpm(sound.bpm, query.bpm_filter, bpm_tolerance):
            continue

        if not matches_key(sound.key, query.key_filter):
            continue

        results.append(replace(sound, match_score=match_score))

    # sorted() is stable, so equal scores keep candidate order
    results = sorted(results, key=lambda s: s.match_score, reverse=True)

    logger.debug(
        f"Search {query.text!r} (bpm={query.bpm_filter}, key={query.key_filter}): "
        f"{len(results)}/{len(candidates)} sounds matched"
    )
    return results
