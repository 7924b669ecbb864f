from __future__ import annotations

import io
import logging
import pathlib
from os import PathLike

from mutagen import File as MutagenFile
from mutagen._util import MutagenError

from .models import Disc
from .parse import Sink, parse

__all__ = ["read_embedded_cuesheet", "parse_embedded"]

logger = logging.getLogger(__name__)

# Vorbis comments and APEv2 keys are case-insensitive in mutagen, but other
# containers store them verbatim.
cuesheet_tags = ("CUESHEET", "cuesheet", "Cuesheet")


def read_embedded_cuesheet(media_file: PathLike | str) -> str | None:
    media_file = pathlib.Path(media_file)
    try:
        audio = MutagenFile(media_file)
    except (IOError, MutagenError) as e:
        logger.error(f"Failed to read tags from {media_file.name}: {e}")
        return None
    if audio is None or audio.tags is None:
        logger.info(f"No tags found in {media_file.name}")
        return None
    for tag in cuesheet_tags:
        try:
            value = audio.tags.get(tag)
        except (KeyError, ValueError):
            continue
        if not value:
            continue
        if isinstance(value, list):
            value = value[0]
        logger.info(f"Found embedded cuesheet in {media_file.name}")
        return str(value)
    return None


def file_line_for(media_file: pathlib.Path) -> str:
    name = media_file.name.replace('"', '\\"')
    return f'FILE "{name}" {media_file.suffix[1:].upper()}'


def parse_embedded(
    media_file: PathLike | str, strict: bool = True, sink: Sink | None = None
) -> Disc | None:
    media_file = pathlib.Path(media_file)
    content = read_embedded_cuesheet(media_file)
    if content is None:
        return None
    lines = list(io.StringIO(content.lstrip("\ufeff"), newline=""))
    # Embedded sheets often leave out FILE since the audio is the container.
    if not any(line.strip().startswith("FILE ") for line in lines):
        lines.insert(0, file_line_for(media_file))
    return parse(lines, strict, sink).disc
