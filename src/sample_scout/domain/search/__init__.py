"""Search domain - tag normalization, match scoring and result ranking.

This domain handles:
- Normalizing query text and tags into comparable tokens
- Scoring exact vs. partial tag matches
- Filtering by tag score, BPM tolerance and musical key
- Ordering results by score
"""

from .models import SearchQuery, SoundRecord, parse_bpm
from .normalize import STEM_SUFFIXES, normalize_words, stem_word
from .ranking import (
    DEFAULT_BPM_TOLERANCE,
    DEFAULT_MIN_MATCH_SCORE,
    matches_bpm,
    matches_key,
    search,
)
from .scoring import (
    EXACT_MATCH_WEIGHT,
    PARTIAL_MATCH_WEIGHT,
    build_tag_vocabulary,
    count_matches,
    score,
)
from .tags import format_tags, resolve_tags

__all__ = [
    # Models
    "SearchQuery",
    "SoundRecord",
    "parse_bpm",
    # Normalization
    "STEM_SUFFIXES",
    "normalize_words",
    "stem_word",
    # Scoring
    "EXACT_MATCH_WEIGHT",
    "PARTIAL_MATCH_WEIGHT",
    "build_tag_vocabulary",
    "count_matches",
    "score",
    # Ranking
    "DEFAULT_BPM_TOLERANCE",
    "DEFAULT_MIN_MATCH_SCORE",
    "matches_bpm",
    "matches_key",
    "search",
    # Tags
    "format_tags",
    "resolve_tags",
]
