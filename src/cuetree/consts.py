import importlib.metadata

VERSION = importlib.metadata.version("cuetree")
cue_files: tuple[str] = ("cue",)
# Containers mutagen can carry a CUESHEET tag in
audio_files: tuple[str, str, str, str, str] = (
    "flac",
    "ape",
    "wv",
    "ogg",
    "tta",
)
