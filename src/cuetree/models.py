import argparse
from collections.abc import Sequence


class GlobalParserArgs(argparse.Namespace):
    paths: Sequence[str]  # pyright: ignore[reportUninitializedInstanceVariable]
    lenient: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    json: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    quiet: bool  # pyright: ignore[reportUninitializedInstanceVariable]
    verbose: bool  # pyright: ignore[reportUninitializedInstanceVariable]
