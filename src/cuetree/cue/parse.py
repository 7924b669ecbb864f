from __future__ import annotations

import dataclasses
import io
import logging
from collections.abc import Callable, Iterable
from os import PathLike
from typing import TypeAlias

from .errors import (
    CueError,
    CueSyntaxError,
    Reason,
    StructuralError,
    UnknownCommandError,
)
from .models import Disc, File, Index, Timestamp, Track
from .tokenize import tokenize

__all__ = [
    "DispatchedLine",
    "SkippedLine",
    "ParseEvent",
    "Sink",
    "ParseState",
    "ParseResult",
    "CueLineInterpreter",
    "logging_sink",
    "parse",
    "parse_cue_str",
    "parse_cuefile",
]


@dataclasses.dataclass(frozen=True)
class DispatchedLine:
    line_number: int
    command: str
    arguments: list[str]


@dataclasses.dataclass(frozen=True)
class SkippedLine:
    line_number: int
    line: str
    reason: Reason
    message: str


ParseEvent: TypeAlias = DispatchedLine | SkippedLine
Sink: TypeAlias = Callable[[ParseEvent], None]


@dataclasses.dataclass()
class ParseState:
    disc: Disc
    file_index: int | None = None
    track_index: int | None = None

    def open_file(self) -> File | None:
        if self.file_index is None:
            return None
        return self.disc.files[self.file_index]

    def open_track(self) -> Track | None:
        file = self.open_file()
        if file is None or self.track_index is None:
            return None
        return file.tracks[self.track_index]


@dataclasses.dataclass()
class ParseResult:
    disc: Disc
    skipped: list[SkippedLine]


def expect_count(command: str, args: list[str], count: int):
    if len(args) != count:
        raise CueSyntaxError(
            Reason.MALFORMED_ARGUMENT,
            f"{command} takes {count} argument{'s' if count > 1 else ''}, got {len(args)}",
        )


def expect_some(command: str, args: list[str], least: int = 1):
    if len(args) < least:
        raise CueSyntaxError(
            Reason.MALFORMED_ARGUMENT,
            f"{command} takes at least {least} argument{'s' if least > 1 else ''}, got {len(args)}",
        )


def parse_number(command: str, value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise CueSyntaxError(
            Reason.MALFORMED_ARGUMENT, f"{command} number {value!r} is not an integer"
        )
    return int(value, 10)


# One method per command. Each validates every argument before touching the
# state so that a rejected line leaves the disc exactly as it was.
class CueLineInterpreter:
    commands: dict[str, str] = {
        "CATALOG": "catalog_line",
        "CDTEXTFILE": "cdtextfile_line",
        "FILE": "file_line",
        "TRACK": "track_line",
        "INDEX": "index_line",
        "PERFORMER": "text_line",
        "SONGWRITER": "text_line",
        "TITLE": "text_line",
        "REM": "rem_line",
        "FLAGS": "flags_line",
        "ISRC": "isrc_line",
        "PREGAP": "gap_line",
        "POSTGAP": "gap_line",
    }

    def __init__(self, state: ParseState | None = None):
        self.state = state if state is not None else ParseState(Disc())

    def dispatch(self, line: str) -> tuple[str, list[str]] | None:
        tokens = tokenize(line)
        if tokens is None:
            return None
        command, args = tokens
        if command not in self.commands:
            raise UnknownCommandError(
                Reason.UNKNOWN_COMMAND, f"unknown command {command!r}"
            )
        getattr(self, self.commands[command])(command, args)
        return tokens

    def require_track(self, command: str, reason: Reason) -> Track:
        track = self.state.open_track()
        if track is None:
            raise StructuralError(reason, f"{command} before any TRACK")
        return track

    def catalog_line(self, command: str, args: list[str]):
        expect_count(command, args, 1)
        self.state.disc.catalog = args[0]

    def cdtextfile_line(self, command: str, args: list[str]):
        expect_count(command, args, 1)
        self.state.disc.cd_text_file = args[0]

    def file_line(self, command: str, args: list[str]):
        expect_some(command, args, 2)
        self.state.disc.files.append(File(" ".join(args[:-1]), args[-1]))
        self.state.file_index = len(self.state.disc.files) - 1
        self.state.track_index = None

    def track_line(self, command: str, args: list[str]):
        file = self.state.open_file()
        if file is None:
            raise StructuralError(Reason.TRACK_WITHOUT_FILE, "TRACK before any FILE")
        expect_count(command, args, 2)
        file.tracks.append(Track(parse_number(command, args[0]), args[1]))
        self.state.track_index = len(file.tracks) - 1

    def index_line(self, command: str, args: list[str]):
        track = self.require_track(command, Reason.INDEX_WITHOUT_TRACK)
        expect_count(command, args, 2)
        number = parse_number(command, args[0])
        track.indices.append(Index(number, Timestamp.parse(args[1])))

    # PERFORMER, SONGWRITER and TITLE land on the open track, else the disc.
    # Indentation is not consulted, so a value meant for the disc that comes
    # after a track still belongs to that track.
    def text_line(self, command: str, args: list[str]):
        expect_some(command, args)
        target = self.state.open_track() or self.state.disc
        setattr(target, command.lower(), " ".join(args))

    def rem_line(self, command: str, args: list[str]):
        target = self.state.open_track() or self.state.disc
        target.comments.append(" ".join(args))

    def flags_line(self, command: str, args: list[str]):
        track = self.require_track(command, Reason.FIELD_WITHOUT_TRACK)
        expect_some(command, args)
        track.flags.extend(args)

    def isrc_line(self, command: str, args: list[str]):
        track = self.require_track(command, Reason.FIELD_WITHOUT_TRACK)
        expect_count(command, args, 1)
        track.isrc = args[0]

    def gap_line(self, command: str, args: list[str]):
        track = self.require_track(command, Reason.FIELD_WITHOUT_TRACK)
        expect_count(command, args, 1)
        setattr(track, command.lower(), Timestamp.parse(args[0]))


def logging_sink(logger: logging.Logger) -> Sink:
    def emit(event: ParseEvent):
        if isinstance(event, SkippedLine):
            logger.warning(
                f"Skipped line {event.line_number} ({event.reason.value}: {event.message}): {event.line.strip()}"
            )
        else:
            logger.info(
                f"Line {event.line_number}: {event.command} {' '.join(event.arguments)}"
            )

    return emit


def parse(
    lines: Iterable[str], strict: bool = True, sink: Sink | None = None
) -> ParseResult:
    interpreter = CueLineInterpreter()
    skipped: list[SkippedLine] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            tokens = interpreter.dispatch(line)
        except CueError as e:
            e.at(line_number, line)
            if strict:
                raise
            skip = SkippedLine(line_number, line, e.reason, e.message)
            skipped.append(skip)
            if sink:
                sink(skip)
            continue
        if tokens is not None and sink:
            sink(DispatchedLine(line_number, *tokens))
    return ParseResult(interpreter.state.disc, skipped)


def parse_cue_str(content: str, strict: bool = True, sink: Sink | None = None) -> Disc:
    # Only line breaks end a line; U+2028 and friends stay inside values.
    lines = io.StringIO(content.lstrip("\ufeff"), newline="")
    return parse(lines, strict, sink).disc


def parse_cuefile(
    file_name: PathLike | str,
    strict: bool = True,
    sink: Sink | None = None,
    encoding: str = "utf-8-sig",
) -> Disc:
    with open(file_name, "r", encoding=encoding, newline="") as f:
        return parse(f, strict, sink).disc
