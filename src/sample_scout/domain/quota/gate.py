"""
Search quota gate.

Free users get a fixed number of searches; premium users are unlimited.
The decision itself is a pure function so it can be tested without a
database. Usage is only recorded after a search actually ran.
"""

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from ...core.config import QuotaConfig


@dataclass(frozen=True)
class QuotaDecision:
    """Result of checking whether a user may run another search."""

    allowed: bool
    search_count: int
    limit: Optional[int]  # None when no limit applies
    remaining: Optional[int]  # None when unlimited


def check_search_quota(
    search_count: int,
    is_premium: bool,
    limit: int,
    enabled: bool = True,
) -> QuotaDecision:
    """Pure function - decide whether another search is allowed."""
    if is_premium or not enabled:
        return QuotaDecision(
            allowed=True, search_count=search_count, limit=None, remaining=None
        )

    remaining = max(0, limit - search_count)
    return QuotaDecision(
        allowed=search_count < limit,
        search_count=search_count,
        limit=limit,
        remaining=remaining,
    )


def ensure_user(db_conn, user_id: str, email: Optional[str] = None) -> dict[str, Any]:
    """Create the user row on first sight and keep the email current."""
    db_conn.execute(
        "INSERT OR IGNORE INTO users (id, email) VALUES (?, ?)", (user_id, email)
    )
    if email:
        db_conn.execute("UPDATE users SET email = ? WHERE id = ?", (email, user_id))
    db_conn.commit()
    return get_user(db_conn, user_id)


def get_user(db_conn, user_id: str) -> Optional[dict[str, Any]]:
    """Fetch a user row, or None if the user has never been seen."""
    row = db_conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    if not row:
        return None
    user = dict(row)
    user["is_premium"] = bool(user["is_premium"])
    return user


def get_search_count(db_conn, user_id: str) -> int:
    """Searches used so far; 0 for unknown users."""
    user = get_user(db_conn, user_id)
    return user["search_count"] if user else 0


def authorize_search(db_conn, user_id: str, config: QuotaConfig) -> QuotaDecision:
    """Read the user's usage and decide whether the search may proceed."""
    user = get_user(db_conn, user_id)
    search_count = user["search_count"] if user else 0
    is_premium = user["is_premium"] if user else False

    decision = check_search_quota(
        search_count, is_premium, config.free_search_limit, enabled=config.enabled
    )
    if not decision.allowed:
        logger.info(
            f"Search quota exhausted for user {user_id} "
            f"({search_count}/{config.free_search_limit})"
        )
    return decision


def record_search(db_conn, user_id: str) -> int:
    """Increment the user's search count and return the new value."""
    db_conn.execute(
        "INSERT OR IGNORE INTO users (id) VALUES (?)", (user_id,)
    )
    db_conn.execute(
        "UPDATE users SET search_count = search_count + 1 WHERE id = ?", (user_id,)
    )
    db_conn.commit()
    return get_search_count(db_conn, user_id)
