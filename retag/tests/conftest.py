"""Shared test fixtures for retag tests."""

import struct
import sys
from pathlib import Path

import pytest
from mutagen._vorbis import VComment
from mutagen.id3 import ID3, TALB, TIT2, TPE1
from mutagen.ogg import OggPage

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from retag.models import TagRequest

# A few MPEG-1 Layer III frame headers followed by silence. Enough for ID3
# reading and writing; no audio decoding happens anywhere.
MP3_BYTES = (b"\xff\xfb\x90\x64" + b"\x00" * 413) * 4

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 32


def make_opus_bytes(comments=None, serial=1234):
    """Build a minimal Ogg Opus stream: ID header, comment header, one audio page."""
    head = b"OpusHead" + struct.pack("<BBHIhB", 1, 2, 312, 48000, 0, 0)

    vcomment = VComment()
    vcomment.vendor = "retag tests"
    for key, value in (comments or {}).items():
        vcomment.append((key, value))
    opus_tags = b"OpusTags" + vcomment.write(framing=False)

    packets = [head, opus_tags, b"\xfc" + b"\x00" * 40]
    positions = [0, 0, 48000 + 312]

    pages = []
    for sequence, (packet, position) in enumerate(zip(packets, positions)):
        page = OggPage()
        page.serial = serial
        page.sequence = sequence
        page.position = position
        page.packets = [packet]
        pages.append(page)
    pages[0].first = True
    pages[-1].last = True

    return b"".join(page.write() for page in pages)


@pytest.fixture
def mp3_file(tmp_path):
    """An MP3 file with no ID3 tag."""
    path = tmp_path / "song.mp3"
    path.write_bytes(MP3_BYTES)
    return path


@pytest.fixture
def tagged_mp3_file(tmp_path):
    """An MP3 file with an existing ID3v2.4 title, artist and album."""
    path = tmp_path / "tagged.mp3"
    path.write_bytes(MP3_BYTES)
    tags = ID3()
    tags.add(TIT2(encoding=3, text=["Old"]))
    tags.add(TPE1(encoding=3, text=["Old Artist"]))
    tags.add(TALB(encoding=3, text=["Old Album"]))
    tags.save(str(path))
    return path


@pytest.fixture
def opus_file(tmp_path):
    """An Opus file with an empty comment header."""
    path = tmp_path / "song.opus"
    path.write_bytes(make_opus_bytes())
    return path


@pytest.fixture
def tagged_opus_file(tmp_path):
    """An Opus file with an existing title, artist and album."""
    path = tmp_path / "tagged.opus"
    path.write_bytes(make_opus_bytes({
        "title": "Old",
        "artist": "Old Artist",
        "album": "Old Album",
    }))
    return path


@pytest.fixture
def png_cover(tmp_path):
    """A small file with a .png extension."""
    path = tmp_path / "cover.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def jpeg_cover(tmp_path):
    """A small file with a .jpg extension."""
    path = tmp_path / "cover.jpg"
    path.write_bytes(JPEG_BYTES)
    return path


@pytest.fixture
def title_request():
    """Request that only changes the title."""
    return TagRequest(title="New", artist="", album="", cover=None)


@pytest.fixture
def empty_request():
    """Request that changes nothing."""
    return TagRequest(title="", artist="", album="", cover=None)
