"""Library-specific exceptions for error handling."""


class LibraryError(Exception):
    """Base exception for library and sound operations."""

    pass


class LibraryNotFoundError(LibraryError):
    """Raised when a library does not exist or belongs to another user."""

    def __init__(self, library_id: int, message: str = None):
        self.library_id = library_id
        super().__init__(message or f"Library #{library_id} not found")


class SoundNotFoundError(LibraryError):
    """Raised when a sound does not exist in any of the user's libraries."""

    def __init__(self, sound_id: str, message: str = None):
        self.sound_id = sound_id
        super().__init__(message or f"Sound {sound_id} not found")


class InvalidSoundError(LibraryError):
    """Raised when required sound fields are missing."""

    pass


class InvalidLibraryError(LibraryError):
    """Raised when a library is created without a usable name."""

    pass
