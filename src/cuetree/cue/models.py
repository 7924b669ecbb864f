from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterator

from .errors import CueSyntaxError, Reason

__all__ = ["FRAMES_PER_SECOND", "Timestamp", "Index", "Track", "File", "Disc"]

FRAMES_PER_SECOND = 75

timestamp_shape = re.compile(r"([0-9]+):([0-9]+):([0-9]+)")


def group_rems(comments: list[str]) -> dict[str, list[str]]:
    rems: dict[str, list[str]] = {}
    for comment in comments:
        key, _, value = comment.partition(" ")
        if key not in rems:
            rems[key] = []
        rems[key].append(value)
    return rems


@dataclasses.dataclass(frozen=True)
class Timestamp:
    minutes: int
    seconds: int
    frames: int

    @classmethod
    def parse(cls, value: str) -> Timestamp:
        match = timestamp_shape.fullmatch(value)
        if not match:
            raise CueSyntaxError(
                Reason.MALFORMED_ARGUMENT, f"invalid timestamp {value!r}, want MM:SS:FF"
            )
        return cls(int(match[1], 10), int(match[2], 10), int(match[3], 10))

    @property
    def total_frames(self) -> int:
        return (self.minutes * 60 + self.seconds) * FRAMES_PER_SECOND + self.frames

    @property
    def total_seconds(self) -> float:
        return self.minutes * 60 + self.seconds + self.frames / FRAMES_PER_SECOND

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}:{self.frames:02d}"


@dataclasses.dataclass()
class Index:
    number: int
    timestamp: Timestamp


@dataclasses.dataclass()
class Track:
    number: int
    mode: str
    indices: list[Index] = dataclasses.field(default_factory=list)
    isrc: str | None = None
    flags: list[str] = dataclasses.field(default_factory=list)
    performer: str | None = None
    songwriter: str | None = None
    title: str | None = None
    comments: list[str] = dataclasses.field(default_factory=list)
    pregap: Timestamp | None = None
    postgap: Timestamp | None = None

    def index(self, number: int) -> Index | None:
        for index in self.indices:
            if index.number == number:
                return index
        return None

    @property
    def start(self) -> Timestamp | None:
        index = self.index(1)
        return index.timestamp if index else None

    @property
    def rems(self) -> dict[str, list[str]]:
        return group_rems(self.comments)


@dataclasses.dataclass()
class File:
    name: str
    file_type: str
    tracks: list[Track] = dataclasses.field(default_factory=list)


@dataclasses.dataclass()
class Disc:
    catalog: str | None = None
    cd_text_file: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    title: str | None = None
    comments: list[str] = dataclasses.field(default_factory=list)
    files: list[File] = dataclasses.field(default_factory=list)

    def tracks(self) -> Iterator[Track]:
        for file in self.files:
            yield from file.tracks

    @property
    def rems(self) -> dict[str, list[str]]:
        return group_rems(self.comments)
