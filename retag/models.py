"""Data models for retag."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class AudioFormat(Enum):
    """Audio formats with a tag handler."""
    MP3 = "mp3"
    OPUS = "opus"

    @classmethod
    def from_path(cls, file_path: str) -> Optional["AudioFormat"]:
        """Get the format for a file from its (case-insensitive) extension."""
        ext = extension_of(file_path)
        for member in cls:
            if member.value == ext:
                return member
        return None


def extension_of(file_path: str) -> str:
    """Return the lower-cased extension of a path without the leading dot."""
    return Path(file_path).suffix.lower().lstrip(".")


@dataclass
class Cover:
    """A cover image ready to embed."""
    data: bytes
    mime: str


@dataclass
class TagRequest:
    """Fields to write into a file. Empty or None fields are left untouched."""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    cover: Optional[str] = None

    def text_fields(self) -> dict:
        """Return the non-empty text fields keyed by name."""
        fields = {
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
        }
        return {name: value for name, value in fields.items() if value}

    def is_empty(self) -> bool:
        """Check if applying this request would change nothing."""
        return not self.text_fields() and not self.cover


@dataclass
class TrackTags:
    """Snapshot of the tags currently stored in a file."""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    cover_count: int = 0


@dataclass
class EditResult:
    """Outcome of one edit run."""
    source: str
    output: str
    format: Optional[AudioFormat] = None

    @property
    def supported(self) -> bool:
        """Check if tags were written (False means a plain copy)."""
        return self.format is not None

    @property
    def extension(self) -> str:
        return extension_of(self.source)
