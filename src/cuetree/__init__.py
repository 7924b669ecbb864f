from .cue import (
    CueError,
    Disc,
    File,
    Index,
    ParseResult,
    Timestamp,
    Track,
    parse,
    parse_cue_str,
    parse_cuefile,
    parse_embedded,
)

__all__ = [
    "CueError",
    "Disc",
    "File",
    "Index",
    "ParseResult",
    "Timestamp",
    "Track",
    "parse",
    "parse_cue_str",
    "parse_cuefile",
    "parse_embedded",
]
