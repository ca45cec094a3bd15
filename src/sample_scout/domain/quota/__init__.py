"""Quota domain - per-user search usage and the search gate."""

from .gate import (
    QuotaDecision,
    authorize_search,
    check_search_quota,
    ensure_user,
    get_search_count,
    get_user,
    record_search,
)

__all__ = [
    "QuotaDecision",
    "authorize_search",
    "check_search_quota",
    "ensure_user",
    "get_search_count",
    "get_user",
    "record_search",
]
