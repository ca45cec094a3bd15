from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, HTTPException

from sample_scout.core.database import get_db_connection
from sample_scout.core.config import load_config, Config
from sample_scout.domain.quota import ensure_user


async def get_db() -> AsyncGenerator:
    """FastAPI dependency for database connections."""
    with get_db_connection() as conn:
        yield conn


def get_config() -> Config:
    """FastAPI dependency for configuration."""
    return load_config()


async def get_current_user(
    x_user_id: Optional[str] = Header(None),
    x_user_email: Optional[str] = Header(None),
    db=Depends(get_db),
) -> dict:
    """Resolve the caller from the identity headers set by the auth proxy.

    The session provider authenticates the request upstream and forwards
    the user id; unknown users get a row on first sight.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(401, "Unauthorized")
    return ensure_user(db, x_user_id.strip(), x_user_email)


def is_admin(user: dict, config: Config) -> bool:
    """Pure function - only the configured admin email may upload sounds."""
    admin_email = config.web.admin_email
    email = user.get("email")
    return bool(admin_email and email and email.lower() == admin_email.lower())
