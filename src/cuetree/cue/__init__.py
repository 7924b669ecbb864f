from .embedded import parse_embedded, read_embedded_cuesheet
from .errors import (
    CueError,
    CueSyntaxError,
    Reason,
    StructuralError,
    UnknownCommandError,
)
from .models import FRAMES_PER_SECOND, Disc, File, Index, Timestamp, Track
from .parse import (
    DispatchedLine,
    ParseResult,
    SkippedLine,
    logging_sink,
    parse,
    parse_cue_str,
    parse_cuefile,
)
from .tokenize import tokenize

__all__ = [
    "CueError",
    "CueSyntaxError",
    "Disc",
    "DispatchedLine",
    "FRAMES_PER_SECOND",
    "File",
    "Index",
    "ParseResult",
    "Reason",
    "SkippedLine",
    "StructuralError",
    "Timestamp",
    "Track",
    "UnknownCommandError",
    "logging_sink",
    "parse",
    "parse_cue_str",
    "parse_cuefile",
    "parse_embedded",
    "read_embedded_cuesheet",
    "tokenize",
]
