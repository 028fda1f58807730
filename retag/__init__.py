"""
retag - Rewrite title, artist, album and cover art on a copy of an audio file.

This package provides tools to:
- Copy an audio file next to the original (or to a chosen path)
- Write ID3v2 tags to MP3 files
- Write Vorbis comments to Opus files
- Embed a front-cover image in either format
"""

__version__ = "1.0.0"
