from enum import Enum

__all__ = [
    "Reason",
    "CueError",
    "StructuralError",
    "CueSyntaxError",
    "UnknownCommandError",
]


class Reason(Enum):
    UNTERMINATED_QUOTE = "UnterminatedQuote"
    UNKNOWN_COMMAND = "UnknownCommand"
    TRACK_WITHOUT_FILE = "TrackWithoutFile"
    INDEX_WITHOUT_TRACK = "IndexWithoutTrack"
    FIELD_WITHOUT_TRACK = "FieldWithoutTrack"
    MALFORMED_ARGUMENT = "MalformedArgument"


class CueError(Exception):
    def __init__(
        self,
        reason: Reason,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.line_number = line_number
        self.line = line

    def at(self, line_number: int, line: str) -> "CueError":
        self.line_number = line_number
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return f"{self.reason.value}: {self.message}"
        return f"line {self.line_number}: {self.reason.value}: {self.message}"


# TRACK before FILE, INDEX before TRACK, ...
class StructuralError(CueError):
    pass


# Unterminated quotes, bad numbers and timestamps
class CueSyntaxError(CueError):
    pass


class UnknownCommandError(CueError):
    pass
