"""Copy an audio file and apply a tag request to the copy."""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from retag.config import DEFAULT_OUTPUT_SUFFIX
from retag.errors import OutputIsSourceError
from retag.models import AudioFormat, EditResult, TagRequest, extension_of
from retag.tag_handler import TagHandler

logger = logging.getLogger(__name__)


def default_output_path(source: str, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> str:
    """Build '<stem><suffix>.<ext>' next to the source file.

    The extension is lower-cased; a source without one gets no extension.
    """
    path = Path(source)
    ext = extension_of(source)
    name = f"{path.stem}{suffix}.{ext}" if ext else f"{path.stem}{suffix}"
    return str(path.with_name(name))


def _same_file(source: str, output: str) -> bool:
    """Check if output names the source file (directly or via a link)."""
    if os.path.exists(output):
        return os.path.samefile(source, output)
    return Path(output).resolve() == Path(source).resolve()


def edit_file(source: str, request: TagRequest, output: Optional[str] = None,
              handler: Optional[TagHandler] = None,
              suffix: str = DEFAULT_OUTPUT_SUFFIX) -> EditResult:
    """
    Copy source to output and write the requested tags into the copy.

    The copy is built in a temporary file beside the output and renamed over
    it only once tagging succeeded, so the output path never holds a
    half-written file. The source is never modified.

    Args:
        source: Path to the original audio file
        request: Tags to write
        output: Output path (defaults to default_output_path(source, suffix))
        handler: Tag handler to use (a default TagHandler if omitted)
        suffix: Suffix for the default output name

    Returns:
        EditResult; result.format is None when the type was unsupported
        and the output is a plain copy.
    """
    if handler is None:
        handler = TagHandler()
    if not output:
        output = default_output_path(source, suffix)

    if _same_file(source, output):
        raise OutputIsSourceError(output)

    fmt = AudioFormat.from_path(source)
    output_path = Path(output)
    output_dir = output_path.parent

    # The handler picks the format from the extension, so keep it on the temp name
    fd, tmp_path = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=Path(source).suffix, dir=str(output_dir)
    )
    os.close(fd)

    try:
        shutil.copyfile(source, tmp_path)
        shutil.copymode(source, tmp_path)
        logger.debug(f"Copied {source} to {tmp_path}")

        if fmt is None:
            logger.info(f"Unsupported file type '{extension_of(source)}', copying only")
        elif request.is_empty():
            logger.debug("Nothing to write, output is a plain copy")
        else:
            handler.write_tags(tmp_path, request)

        os.replace(tmp_path, output)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.debug(f"Saved {output}")
    return EditResult(source=str(source), output=str(output), format=fmt)
