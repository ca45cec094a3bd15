from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from sample_scout.domain.library import (
    InvalidLibraryError,
    create_library,
    get_or_create_default_library,
    list_libraries,
)
from ..deps import get_db, get_current_user
from ..schemas import CreateLibraryRequest, LibraryOut

router = APIRouter()


@router.get("/libraries", response_model=list[LibraryOut])
async def get_libraries(user: dict = Depends(get_current_user), db=Depends(get_db)):
    """List the caller's libraries, newest first."""
    try:
        return list_libraries(db, user["id"])
    except Exception:
        logger.exception(f"Failed to list libraries for user {user['id']}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/libraries", response_model=LibraryOut)
async def post_library(
    request: CreateLibraryRequest,
    user: dict = Depends(get_current_user),
    db=Depends(get_db),
):
    """Create a named library."""
    try:
        return create_library(db, user["id"], request.name)
    except InvalidLibraryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception(f"Failed to create library for user {user['id']}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/library", response_model=LibraryOut)
async def ensure_default_library(
    user: dict = Depends(get_current_user), db=Depends(get_db)
):
    """Return the caller's default library, creating it if needed."""
    try:
        return get_or_create_default_library(db, user["id"])
    except Exception:
        logger.exception(f"Failed to create default library for user {user['id']}")
        raise HTTPException(status_code=500, detail="Failed to create library")
