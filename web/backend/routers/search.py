from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from typing import Optional

from sample_scout.core.config import Config
from sample_scout.domain.library import fetch_candidates
from sample_scout.domain.quota import authorize_search, record_search
from sample_scout.domain.search import SearchQuery, search
from ..deps import get_db, get_config, get_current_user
from ..schemas import SoundOut

router = APIRouter()

UPGRADE_MESSAGE = "You have used all your free searches. Upgrade to keep searching."


@router.get("/search", response_model=list[SoundOut])
async def search_sounds(
    q: str = "",
    bpm: Optional[str] = None,
    key: Optional[str] = None,
    user: dict = Depends(get_current_user),
    db=Depends(get_db),
    config: Config = Depends(get_config),
):
    """Rank every sound against the query text and optional BPM/key filters."""
    decision = authorize_search(db, user["id"], config.quota)
    if not decision.allowed:
        raise HTTPException(
            status_code=402,
            detail={
                "message": UPGRADE_MESSAGE,
                "search_count": decision.search_count,
                "limit": decision.limit,
                "upgrade_required": True,
            },
        )

    query = SearchQuery.from_params(q=q, bpm=bpm, key=key)
    if bpm and query.bpm_filter is None:
        logger.warning(f"Ignoring non-numeric bpm parameter: {bpm!r}")

    logger.debug(f"Search params: q={query.text!r} bpm={query.bpm_filter} key={query.key_filter}")

    try:
        candidates = fetch_candidates(db)
        results = search(
            candidates,
            query,
            bpm_tolerance=config.search.bpm_tolerance,
            min_match_score=config.search.min_match_score,
        )
        record_search(db, user["id"])
    except Exception:
        logger.exception("Search failed")
        raise HTTPException(status_code=500, detail="Failed to search sounds")

    logger.info(f"Search {query.text!r} by {user['id']}: {len(results)} results")
    return [SoundOut.from_record(sound) for sound in results]
