#!/bin/env python
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import logging.config
import pathlib
import sys
from collections.abc import Sequence
from typing import cast

from cuetree.consts import VERSION, audio_files, cue_files
from cuetree.cue import CueError, Disc, logging_sink, parse_cuefile, parse_embedded
from cuetree.cue.parse import Sink
from cuetree.models import GlobalParserArgs

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"simple": {"format": "%(message)s"}},
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
            "stream": "ext://sys.stdout",
        }
    },
    "loggers": {"root": {"level": "WARNING", "handlers": ["stdout"]}},
}

single_process_logger = logging.getLogger("cuetree")


def format_disc(disc: Disc) -> str:
    lines: list[str] = []
    for field in ("catalog", "cd_text_file", "performer", "songwriter", "title"):
        value = getattr(disc, field)
        if value is not None:
            lines.append(f"{field}: {value}")
    lines.extend(f"REM {comment}" for comment in disc.comments)
    for file in disc.files:
        lines.append(f'FILE "{file.name}" {file.file_type}')
        for track in file.tracks:
            lines.append(f"  TRACK {track.number:02d} {track.mode}")
            for field in ("title", "performer", "songwriter", "isrc"):
                value = getattr(track, field)
                if value is not None:
                    lines.append(f"    {field}: {value}")
            if track.flags:
                lines.append(f"    flags: {' '.join(track.flags)}")
            if track.pregap is not None:
                lines.append(f"    PREGAP {track.pregap}")
            for index in track.indices:
                lines.append(f"    INDEX {index.number:02d} {index.timestamp}")
            if track.postgap is not None:
                lines.append(f"    POSTGAP {track.postgap}")
            lines.extend(f"    REM {comment}" for comment in track.comments)
    return "\n".join(lines)


def load_disc(path: pathlib.Path, strict: bool, sink: Sink) -> Disc | None:
    suffix = path.suffix[1:].lower()
    if suffix in audio_files:
        disc = parse_embedded(path, strict, sink)
        if disc is None:
            single_process_logger.error(f"No embedded cuesheet found in {path.name}")
        return disc
    if suffix not in cue_files:
        single_process_logger.warning(
            f"{path.name} is not a .cue file, reading it as a cuesheet anyway"
        )
    return parse_cuefile(path, strict, sink)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cuetree",
        description="Read cuesheets into a disc/file/track outline",
    )
    _ = parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Cuesheets to read. Audio files (flac, ape, wv, ...) are searched for an embedded CUESHEET tag.",
    )
    _ = parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    _ = parser.add_argument(
        "-l",
        "--lenient",
        help="Skip malformed or out-of-place lines instead of failing",
        action="store_true",
    )
    _ = parser.add_argument(
        "-j", "--json", help="Print the parsed disc as JSON", action="store_true"
    )
    logging_opts = parser.add_mutually_exclusive_group()
    _ = logging_opts.add_argument(
        "-q", "--quiet", help="Only log errors", action="store_true"
    )
    _ = logging_opts.add_argument(
        "-V",
        "--verbose",
        help="Log every line as it is dispatched",
        action="store_true",
    )
    args = cast(GlobalParserArgs, parser.parse_args(argv))
    logging.config.dictConfig(logging_config)
    logging.getLogger().setLevel(logging.WARNING)
    if args.quiet:
        logging.getLogger().setLevel(logging.ERROR)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    sink = logging_sink(single_process_logger)
    failed = False
    for location in args.paths:
        path = pathlib.Path(location).expanduser().resolve()
        try:
            disc = load_disc(path, not args.lenient, sink)
        except CueError as e:
            single_process_logger.error(f"Failed to parse {path.name}: {e}")
            failed = True
            continue
        except (OSError, UnicodeDecodeError) as e:
            single_process_logger.error(f"Failed to read {path}: {e}")
            failed = True
            continue
        if disc is None:
            failed = True
            continue
        if args.json:
            print(json.dumps(dataclasses.asdict(disc), ensure_ascii=False, indent=2))
        else:
            print(format_disc(disc))
    if failed:
        sys.exit(1)
