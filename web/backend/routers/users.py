from fastapi import APIRouter, Depends

from sample_scout.core.config import Config
from sample_scout.domain.quota import check_search_quota
from ..deps import get_config, get_current_user
from ..schemas import SearchCountResponse

router = APIRouter()


@router.get("/user/search-count", response_model=SearchCountResponse)
async def get_search_count(
    user: dict = Depends(get_current_user), config: Config = Depends(get_config)
):
    """Searches used so far and the caller's limit (None when unlimited)."""
    decision = check_search_quota(
        user["search_count"],
        user["is_premium"],
        config.quota.free_search_limit,
        enabled=config.quota.enabled,
    )
    return SearchCountResponse(
        search_count=user["search_count"],
        limit=decision.limit,
        is_premium=user["is_premium"],
    )
