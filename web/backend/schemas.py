from pydantic import BaseModel
from typing import Optional, Union

from sample_scout.domain.search import SoundRecord


class SoundOut(BaseModel):
    id: str
    name: str
    audio_url: Optional[str] = None
    tags: list[str]
    bpm: Optional[int] = None
    key: Optional[str] = None
    library_id: Optional[int] = None
    match_score: float = 0.0  # Only meaningful within one search

    @classmethod
    def from_record(cls, sound: SoundRecord) -> "SoundOut":
        return cls(**sound.to_dict())


class LibraryOut(BaseModel):
    id: int
    user_id: str
    name: str
    is_default: bool
    created_at: Optional[str] = None


class CreateLibraryRequest(BaseModel):
    name: Optional[str] = None  # Validated in the route to return 400, not 422


class CreateSoundRequest(BaseModel):
    library_id: int
    name: str
    audio_url: Optional[str] = None
    tags: Union[list[str], str] = []  # Comma-joined string also accepted
    bpm: Optional[int] = None
    key: Optional[str] = None


class DeleteSoundResponse(BaseModel):
    success: bool


class SearchCountResponse(BaseModel):
    search_count: int
    limit: Optional[int] = None  # None for premium users or disabled quota
    is_premium: bool
