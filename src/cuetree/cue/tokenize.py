from __future__ import annotations

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedInput

from .errors import CueSyntaxError, Reason

__all__ = ["tokenize", "split_command", "split_arguments", "unescape"]


def unescape(value: str) -> str:
    return value.replace('\\"', '"')


class ArgumentTransformer(Transformer):
    @v_args(inline=True)
    def argument(self, token: Token) -> str:
        if token.type == "QUOTED":
            return unescape(str(token[1:-1]))
        return str(token)

    def start(self, children: list[str]) -> list[str]:
        return list(children)


argument_parser = Lark.open(
    "line.lark",
    rel_to=__file__,
    parser="lalr",
    transformer=ArgumentTransformer(),
)


def split_command(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped:
        return None
    # Only the first single space separates the keyword. Anything else
    # (tabs, runs of spaces) stays in the remainder and fails to scan.
    command, _, remainder = stripped.partition(" ")
    return command, remainder


def split_arguments(remainder: str, offset: int = 0) -> list[str]:
    if not remainder:
        return []
    try:
        return argument_parser.parse(remainder)
    except UnexpectedCharacters as e:
        column = offset + e.column
        if e.char == '"':
            raise CueSyntaxError(
                Reason.UNTERMINATED_QUOTE, f"unterminated quote at column {column}"
            ) from e
        raise CueSyntaxError(
            Reason.MALFORMED_ARGUMENT, f"unexpected {e.char!r} at column {column}"
        ) from e
    except UnexpectedInput as e:
        # UnexpectedEOF has no position
        if not isinstance(e.column, int) or e.column < 1:
            raise CueSyntaxError(
                Reason.MALFORMED_ARGUMENT, "cannot split arguments"
            ) from e
        raise CueSyntaxError(
            Reason.MALFORMED_ARGUMENT,
            f"cannot split arguments at column {offset + e.column}",
        ) from e


def tokenize(line: str) -> tuple[str, list[str]] | None:
    split = split_command(line)
    if split is None:
        return None
    command, remainder = split
    # Columns are reported against the untrimmed line.
    indent = len(line) - len(line.lstrip())
    return command, split_arguments(remainder, indent + len(command) + 1)
