"""Library domain - sound libraries and the sound catalogue.

This domain handles:
- Per-user libraries (named and default)
- Registering and deleting sounds
- Materializing the search candidate set
"""

from .crud import (
    DEFAULT_LIBRARY_NAME,
    add_sound,
    create_library,
    delete_sound,
    fetch_candidates,
    get_library,
    get_or_create_default_library,
    get_sound,
    list_libraries,
    row_to_sound_record,
)
from .exceptions import (
    InvalidLibraryError,
    InvalidSoundError,
    LibraryError,
    LibraryNotFoundError,
    SoundNotFoundError,
)

__all__ = [
    "DEFAULT_LIBRARY_NAME",
    "add_sound",
    "create_library",
    "delete_sound",
    "fetch_candidates",
    "get_library",
    "get_or_create_default_library",
    "get_sound",
    "list_libraries",
    "row_to_sound_record",
    "InvalidLibraryError",
    "InvalidSoundError",
    "LibraryError",
    "LibraryNotFoundError",
    "SoundNotFoundError",
]
