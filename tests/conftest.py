"""Shared cuesheets for the cuetree test suite."""

import pytest

FULL_SHEET = """\
REM GENRE "Electronic"
REM DATE 2019
CATALOG 4988002776587
CDTEXTFILE "disc.cdt"
PERFORMER "Various Artists"
SONGWRITER "Various Writers"
TITLE "Compilation"
FILE "disc one.flac" WAVE
  TRACK 01 AUDIO
    TITLE "Opening"
    PERFORMER "Artist A"
    ISRC JPVI01900001
    FLAGS DCP PRE
    INDEX 00 00:00:00
    INDEX 01 00:00:32
  TRACK 02 AUDIO
    TITLE "Second \\"Take\\""
    PERFORMER "Artist B"
    PREGAP 00:02:00
    INDEX 01 04:15:60
    REM COMMENT "after the index"
FILE "disc two.flac" WAVE
  TRACK 03 AUDIO
    TITLE "Closing"
    INDEX 01 00:00:00
    POSTGAP 00:01:00
"""

SINGLE_TRACK_SHEET = """\
FILE "audio.wav" WAVE
  TRACK 01 AUDIO
    TITLE "song"
    INDEX 01 00:00:00
"""

UNICODE_SHEET = """\
PERFORMER "ゆよゆっぺ"
TITLE "マジコカタストロフィ"
FILE "01.wav" WAVE
  TRACK 01 AUDIO
    TITLE "éàü – 曲名 🎵"
    INDEX 01 00:00:00
"""

INDEX_BEFORE_TRACK_SHEET = """\
FILE "a.wav" WAVE
INDEX 01 00:00:00
  TRACK 01 AUDIO
    INDEX 01 00:00:00
"""


@pytest.fixture
def full_sheet_lines():
    return FULL_SHEET.splitlines()


@pytest.fixture
def cue_path(tmp_path):
    path = tmp_path / "disc.cue"
    path.write_text(FULL_SHEET, encoding="utf-8")
    return path
