"""
Library and sound CRUD operations.

All functions take an open sqlite3 connection so routes can share the
request-scoped connection from the get_db dependency.
"""

import sqlite3
import uuid
from typing import Any, Optional

from loguru import logger

from ..search.models import SoundRecord
from ..search.tags import format_tags
from .exceptions import (
    InvalidLibraryError,
    InvalidSoundError,
    LibraryNotFoundError,
    SoundNotFoundError,
)

DEFAULT_LIBRARY_NAME = "My Sounds"


def _library_row_to_dict(row: sqlite3.Row) -> dict[str, Any]:
    library = dict(row)
    library["is_default"] = bool(library["is_default"])
    return library


def row_to_sound_record(row: sqlite3.Row) -> SoundRecord:
    """Convert a sounds row to a SoundRecord (tags stay comma-joined)."""
    return SoundRecord(
        id=row["id"],
        name=row["name"],
        tags=row["tags"] or "",
        bpm=row["bpm"],
        key=row["key"],
        audio_url=row["audio_url"],
        library_id=row["library_id"],
    )


def create_library(db_conn, user_id: str, name: str) -> dict[str, Any]:
    """Create a named library for a user.

    Raises:
        InvalidLibraryError: If name is blank
    """
    name = (name or "").strip()
    if not name:
        raise InvalidLibraryError("Library name is required")

    cursor = db_conn.execute(
        "INSERT INTO libraries (user_id, name, is_default) VALUES (?, ?, FALSE)",
        (user_id, name),
    )
    db_conn.commit()

    logger.info(f"Created library #{cursor.lastrowid} '{name}' for user {user_id}")
    return get_library(db_conn, cursor.lastrowid, user_id)


def get_library(
    db_conn, library_id: int, user_id: Optional[str] = None
) -> dict[str, Any]:
    """Fetch one library, optionally restricted to an owner.

    Raises:
        LibraryNotFoundError: If no matching library exists
    """
    if user_id is None:
        row = db_conn.execute(
            "SELECT * FROM libraries WHERE id = ?", (library_id,)
        ).fetchone()
    else:
        row = db_conn.execute(
            "SELECT * FROM libraries WHERE id = ? AND user_id = ?",
            (library_id, user_id),
        ).fetchone()

    if not row:
        raise LibraryNotFoundError(library_id)
    return _library_row_to_dict(row)


def list_libraries(db_conn, user_id: str) -> list[dict[str, Any]]:
    """List a user's libraries, newest first."""
    cursor = db_conn.execute(
        """
        SELECT * FROM libraries
        WHERE user_id = ?
        ORDER BY created_at DESC, id DESC
        """,
        (user_id,),
    )
    return [_library_row_to_dict(row) for row in cursor.fetchall()]


def get_or_create_default_library(db_conn, user_id: str) -> dict[str, Any]:
    """Return the user's default library, creating it on first use."""
    # idx_libraries_one_default makes a concurrent duplicate insert a no-op
    cursor = db_conn.execute(
        "INSERT OR IGNORE INTO libraries (user_id, name, is_default) VALUES (?, ?, TRUE)",
        (user_id, DEFAULT_LIBRARY_NAME),
    )
    db_conn.commit()
    if cursor.rowcount:
        logger.info(f"Created default library #{cursor.lastrowid} for user {user_id}")

    row = db_conn.execute(
        "SELECT * FROM libraries WHERE user_id = ? AND is_default = TRUE",
        (user_id,),
    ).fetchone()
    return _library_row_to_dict(row)


def add_sound(
    db_conn,
    library_id: int,
    name: str,
    audio_url: Optional[str] = None,
    tags: Any = None,
    bpm: Optional[int] = None,
    key: Optional[str] = None,
) -> SoundRecord:
    """Register a sound in a library. The store assigns the sound id.

    Raises:
        InvalidSoundError: If name is blank
        LibraryNotFoundError: If the library does not exist
    """
    name = (name or "").strip()
    if not name:
        raise InvalidSoundError("Sound name is required")

    get_library(db_conn, library_id)

    sound_id = uuid.uuid4().hex
    db_conn.execute(
        """
        INSERT INTO sounds (id, library_id, name, audio_url, tags, bpm, key)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (
            sound_id,
            library_id,
            name,
            audio_url,
            format_tags(tags),
            bpm,
            key.strip() if key and key.strip() else None,
        ),
    )
    db_conn.commit()

    logger.info(f"Added sound {sound_id} '{name}' to library #{library_id}")
    return get_sound(db_conn, sound_id)


def get_sound(db_conn, sound_id: str) -> SoundRecord:
    """Fetch one sound.

    Raises:
        SoundNotFoundError: If the sound does not exist
    """
    row = db_conn.execute("SELECT * FROM sounds WHERE id = ?", (sound_id,)).fetchone()
    if not row:
        raise SoundNotFoundError(sound_id)
    return row_to_sound_record(row)


def delete_sound(db_conn, user_id: str, sound_id: str) -> None:
    """Delete a sound that lives in one of the user's libraries.

    Raises:
        SoundNotFoundError: If no such sound belongs to the user
    """
    cursor = db_conn.execute(
        """
        DELETE FROM sounds
        WHERE id = ?
          AND library_id IN (SELECT id FROM libraries WHERE user_id = ?)
        """,
        (sound_id, user_id),
    )
    db_conn.commit()

    if cursor.rowcount == 0:
        raise SoundNotFoundError(sound_id)
    logger.info(f"Deleted sound {sound_id} for user {user_id}")


def fetch_candidates(db_conn) -> list[SoundRecord]:
    """Materialize every sound as a search candidate, in insertion order."""
    cursor = db_conn.execute("SELECT * FROM sounds ORDER BY rowid")
    return [row_to_sound_record(row) for row in cursor.fetchall()]
