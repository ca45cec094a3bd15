"""
Search domain models.

Contains the read-only sound record handed to the ranker and the
per-request search query.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from .tags import resolve_tags

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class SoundRecord:
    """Represents one catalogued audio sample.

    Owned by the data source; the ranker only ever returns copies with
    match_score filled in.
    """

    id: str
    name: str
    tags: Any = ()  # Comma-joined string, list of labels, or list of {"name": ...}
    bpm: Optional[int] = None
    key: Optional[str] = None  # e.g. "C minor", compared case-insensitively
    audio_url: Optional[str] = None
    library_id: Optional[int] = None
    match_score: float = 0.0  # Transient, set per search

    @property
    def tag_list(self) -> list[str]:
        """Tags as a plain list of labels regardless of stored shape."""
        return resolve_tags(self.tags)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tags": self.tag_list,
            "bpm": self.bpm,
            "key": self.key,
            "audio_url": self.audio_url,
            "library_id": self.library_id,
            "match_score": self.match_score,
        }


@dataclass(frozen=True)
class SearchQuery:
    """One search request: free text plus optional BPM and key filters."""

    text: str = ""
    bpm_filter: Optional[int] = None
    key_filter: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        q: Optional[str] = None,
        bpm: Optional[str] = None,
        key: Optional[str] = None,
    ) -> "SearchQuery":
        """Build a query from raw request parameters.

        Empty strings mean "not supplied". BPM accepts a leading integer
        ("128", "128bpm"); anything else is treated as no BPM filter.
        """
        return cls(
            text=(q or "").lower(),
            bpm_filter=parse_bpm(bpm),
            key_filter=key if key else None,
        )


def parse_bpm(value: Optional[str]) -> Optional[int]:
    """Parse a BPM request parameter, returning None when absent or non-numeric."""
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))
