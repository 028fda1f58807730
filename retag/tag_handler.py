"""Tag handler using mutagen for MP3 (ID3v2) and Opus (Vorbis comment) files."""

import base64
import logging
from pathlib import Path
from typing import Optional

import mutagen
from mutagen import MutagenError
from mutagen.flac import Picture
from mutagen.id3 import ID3, APIC, TALB, TIT2, TPE1, ID3NoHeaderError, PictureType
from mutagen.oggopus import OggOpus

from retag.cover import load_cover
from retag.errors import TagReadError, TagWriteError, UnsupportedContainerError
from retag.models import AudioFormat, TagRequest, TrackTags

logger = logging.getLogger(__name__)


class TagHandler:
    """Reads and writes title, artist, album and cover art."""

    SUPPORTED_EXTENSIONS = {f".{fmt.value}" for fmt in AudioFormat}

    ID3_FRAMES = {
        "title": TIT2,
        "artist": TPE1,
        "album": TALB,
    }

    OPUS_PICTURE_KEY = "metadata_block_picture"

    def __init__(self, id3_version: int = 4):
        """
        Initialize handler.

        Args:
            id3_version: ID3v2 minor version to save MP3 tags as (3 or 4)
        """
        self.id3_version = id3_version
        self._writers = {
            AudioFormat.MP3: self._write_mp3_tags,
            AudioFormat.OPUS: self._write_opus_tags,
        }
        self._readers = {
            AudioFormat.MP3: self._read_mp3_tags,
            AudioFormat.OPUS: self._read_opus_tags,
        }

    @classmethod
    def is_supported(cls, file_path: str) -> bool:
        """Check if file format is supported."""
        return Path(file_path).suffix.lower() in cls.SUPPORTED_EXTENSIONS

    @classmethod
    def get_format(cls, file_path: str) -> Optional[AudioFormat]:
        """Get audio format from file extension."""
        return AudioFormat.from_path(file_path)

    def write_tags(self, file_path: str, request: TagRequest) -> AudioFormat:
        """
        Apply a tag request to a file in place.

        Args:
            file_path: Path to audio file (mp3 or opus)
            request: Fields to write; empty fields are left untouched

        Returns:
            The format the file was handled as

        Raises:
            ValueError: If the extension has no handler
            TagError: If the file cannot be opened or saved
            OSError: If the cover image cannot be read
        """
        fmt = self.get_format(file_path)
        if fmt is None:
            raise ValueError(f"Unsupported format: {Path(file_path).suffix}")

        logger.debug(f"Writing {fmt.value} tags to {file_path}")
        self._writers[fmt](file_path, request)
        return fmt

    def read_tags(self, file_path: str) -> TrackTags:
        """
        Read the current tags from an audio file.

        Args:
            file_path: Path to audio file

        Returns:
            TrackTags snapshot (empty for unsupported or untagged files)
        """
        fmt = self.get_format(file_path)
        if fmt is None:
            return TrackTags()
        return self._readers[fmt](file_path)

    # MP3

    def _load_id3(self, file_path: str) -> Optional[ID3]:
        """Load the ID3 tag of a file, or None if there is no usable tag."""
        try:
            return ID3(file_path)
        except ID3NoHeaderError:
            logger.debug(f"No ID3 tag in {file_path}, starting from an empty tag")
        except MutagenError as e:
            logger.debug(f"Unreadable ID3 tag in {file_path} ({e}), starting from an empty tag")
        return None

    def _write_mp3_tags(self, file_path: str, request: TagRequest) -> None:
        """Write ID3v2 tags to MP3 file."""
        tags = self._load_id3(file_path)
        if tags is None:
            tags = ID3()

        for name, value in request.text_fields().items():
            frame_cls = self.ID3_FRAMES[name]
            tags.setall(frame_cls.__name__, [frame_cls(encoding=3, text=[value])])

        if request.cover:
            cover = load_cover(request.cover, AudioFormat.MP3)
            tags.add(APIC(
                encoding=3,
                mime=cover.mime,
                type=PictureType.COVER_FRONT,
                desc=self._free_picture_desc(tags),
                data=cover.data,
            ))

        if self.id3_version == 3:
            tags.update_to_v23()

        try:
            tags.save(file_path, v2_version=self.id3_version)
        except MutagenError as e:
            raise TagWriteError(file_path, str(e)) from e

    def _free_picture_desc(self, tags: ID3) -> str:
        """
        Return an empty description, padded with spaces if already taken.

        ID3 allows one APIC frame per description, so earlier pictures are
        kept by giving the new one a distinct key (mutagen pads duplicates
        the same way when loading).
        """
        desc = ""
        while f"APIC:{desc}" in tags:
            desc += " "
        return desc

    def _read_mp3_tags(self, file_path: str) -> TrackTags:
        """Read ID3v2 tags from MP3 file."""
        tags = self._load_id3(file_path)
        if tags is None:
            return TrackTags()

        return TrackTags(
            title=self._get_id3_str(tags, "TIT2"),
            artist=self._get_id3_str(tags, "TPE1"),
            album=self._get_id3_str(tags, "TALB"),
            cover_count=len(tags.getall("APIC")),
        )

    def _get_id3_str(self, tags: ID3, key: str) -> Optional[str]:
        """Get string value from ID3 text frame."""
        frame = tags.get(key)
        if frame and frame.text:
            value = str(frame.text[0])
            return value if value else None
        return None

    # Opus

    def _open_opus(self, file_path: str) -> OggOpus:
        """Open a file and make sure it is an Ogg Opus stream."""
        try:
            audio = mutagen.File(file_path)
        except MutagenError as e:
            raise TagReadError(file_path, str(e)) from e

        if not isinstance(audio, OggOpus):
            raise UnsupportedContainerError(file_path, "Ogg Opus")
        return audio

    def _write_opus_tags(self, file_path: str, request: TagRequest) -> None:
        """Write Vorbis comments to Opus file."""
        audio = self._open_opus(file_path)
        if audio.tags is None:
            audio.add_tags()

        tags = audio.tags
        for name, value in request.text_fields().items():
            tags[name] = [value]

        if request.cover:
            cover = load_cover(request.cover, AudioFormat.OPUS)
            picture = Picture()
            picture.type = PictureType.COVER_FRONT
            picture.mime = cover.mime
            picture.desc = ""
            picture.data = cover.data

            pictures = list(tags.get(self.OPUS_PICTURE_KEY, []))
            pictures.append(base64.b64encode(picture.write()).decode("ascii"))
            tags[self.OPUS_PICTURE_KEY] = pictures

        try:
            audio.save()
        except MutagenError as e:
            raise TagWriteError(file_path, str(e)) from e

    def _read_opus_tags(self, file_path: str) -> TrackTags:
        """Read Vorbis comments from Opus file."""
        audio = self._open_opus(file_path)
        tags = audio.tags
        if tags is None:
            return TrackTags()

        return TrackTags(
            title=tags.get("title", [None])[0],
            artist=tags.get("artist", [None])[0],
            album=tags.get("album", [None])[0],
            cover_count=len(tags.get(self.OPUS_PICTURE_KEY, [])),
        )
