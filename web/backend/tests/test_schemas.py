"""Tests for backend schemas."""

import pytest
from pydantic import ValidationError

from sample_scout.core.config import Config
from sample_scout.domain.search import SoundRecord
from web.backend.deps import is_admin
from web.backend.schemas import CreateSoundRequest, SoundOut


def test_sound_out_from_record():
    """Test SoundOut flattens any tag shape into a list."""
    sound = SoundRecord(
        id="abc",
        name="Drum Break",
        tags="drums,loop",
        bpm=128,
        match_score=2.0,
    )

    out = SoundOut.from_record(sound)

    assert out.id == "abc"
    assert out.tags == ["drums", "loop"]
    assert out.bpm == 128
    assert out.key is None
    assert out.match_score == 2.0


def test_sound_out_malformed_tags():
    """Test SoundOut with tags that are neither string nor list."""
    out = SoundOut.from_record(SoundRecord(id="x", name="Broken", tags=42))
    assert out.tags == []


def test_create_sound_request_defaults():
    """Test CreateSoundRequest optional fields."""
    request = CreateSoundRequest(library_id=1, name="Kick")

    assert request.tags == []
    assert request.bpm is None
    assert request.key is None


def test_create_sound_request_requires_library():
    with pytest.raises(ValidationError):
        CreateSoundRequest(name="Kick")


class TestIsAdmin:
    """Test admin email check."""

    def test_matching_email(self):
        config = Config()
        config.web.admin_email = "Admin@Example.com"
        assert is_admin({"email": "admin@example.com"}, config)

    def test_other_email(self):
        config = Config()
        config.web.admin_email = "admin@example.com"
        assert not is_admin({"email": "user@example.com"}, config)

    def test_no_admin_configured(self):
        assert not is_admin({"email": "admin@example.com"}, Config())

    def test_user_without_email(self):
        config = Config()
        config.web.admin_email = "admin@example.com"
        assert not is_admin({"email": None}, config)
