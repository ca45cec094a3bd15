"""Sample Scout - tag-based search for short audio samples."""

__version__ = "0.1.0"
