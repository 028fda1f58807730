"""Cover image loading and MIME type inference."""

import logging
from pathlib import Path

from retag.models import AudioFormat, Cover, extension_of

logger = logging.getLogger(__name__)

PNG_MIME = "image/png"
JPEG_MIME = "image/jpeg"

# Extension -> MIME per target format. Unlisted extensions fall back to JPEG.
MIME_TYPES = {
    AudioFormat.MP3: {
        "png": PNG_MIME,
        "jpg": JPEG_MIME,
        "jpeg": JPEG_MIME,
    },
    AudioFormat.OPUS: {
        "png": PNG_MIME,
    },
}


def guess_mime(image_path: str, fmt: AudioFormat) -> str:
    """Infer the MIME type of a cover image from its extension."""
    ext = extension_of(image_path)
    mime = MIME_TYPES[fmt].get(ext)
    if mime is None:
        mime = JPEG_MIME
        if ext not in ("jpg", "jpeg"):
            logger.debug(f"Unknown cover extension '{ext}', assuming {mime}")
    return mime


def load_cover(image_path: str, fmt: AudioFormat) -> Cover:
    """
    Read a cover image for embedding in a file of the given format.

    Args:
        image_path: Path to the image file
        fmt: Target audio format (selects the MIME table)

    Returns:
        Cover with raw bytes and inferred MIME type

    Raises:
        OSError: If the image cannot be read
    """
    data = Path(image_path).read_bytes()
    return Cover(data=data, mime=guess_mime(image_path, fmt))
