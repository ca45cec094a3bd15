from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from sample_scout.core.config import Config
from sample_scout.domain.library import (
    InvalidSoundError,
    LibraryNotFoundError,
    SoundNotFoundError,
    add_sound,
    delete_sound,
)
from ..deps import get_db, get_config, get_current_user, is_admin
from ..schemas import CreateSoundRequest, DeleteSoundResponse, SoundOut

router = APIRouter()


@router.post("/sounds", response_model=SoundOut)
async def create_sound(
    request: CreateSoundRequest,
    user: dict = Depends(get_current_user),
    db=Depends(get_db),
    config: Config = Depends(get_config),
):
    """Register an uploaded sound's metadata. Admin only."""
    if not is_admin(user, config):
        logger.warning(f"Blocked sound upload by non-admin user {user['id']}")
        raise HTTPException(403, "Admin access only")

    try:
        sound = add_sound(
            db,
            request.library_id,
            request.name,
            audio_url=request.audio_url,
            tags=request.tags,
            bpm=request.bpm,
            key=request.key,
        )
    except InvalidSoundError as e:
        raise HTTPException(400, str(e))
    except LibraryNotFoundError as e:
        raise HTTPException(404, str(e))
    except Exception:
        logger.exception("Failed to create sound")
        raise HTTPException(status_code=500, detail="Internal server error")

    return SoundOut.from_record(sound)


@router.delete("/sounds/{sound_id}", response_model=DeleteSoundResponse)
async def remove_sound(
    sound_id: str, user: dict = Depends(get_current_user), db=Depends(get_db)
):
    """Delete a sound from one of the caller's libraries."""
    try:
        delete_sound(db, user["id"], sound_id)
    except SoundNotFoundError:
        raise HTTPException(404, "Sound not found")
    except Exception:
        logger.exception(f"Failed to delete sound {sound_id}")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"success": True}
