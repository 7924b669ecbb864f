import pytest

from cuetree.cue.errors import CueSyntaxError, Reason
from cuetree.cue.models import FRAMES_PER_SECOND, Disc, File, Index, Timestamp, Track


class TestTimestamp:
    def test_parse(self):
        assert Timestamp.parse("04:15:60") == Timestamp(4, 15, 60)
        assert Timestamp.parse("123:4:5") == Timestamp(123, 4, 5)

    @pytest.mark.parametrize("value", ["", "1:2", "1:2:3:4", "a:b:c", "-1:00:00", " 1:2:3", "٠١:٠٠:٠٠"])
    def test_rejects_bad_shapes(self, value):
        with pytest.raises(CueSyntaxError) as e:
            Timestamp.parse(value)
        assert e.value.reason is Reason.MALFORMED_ARGUMENT

    def test_frames_and_seconds(self):
        stamp = Timestamp(1, 2, 30)
        assert stamp.total_frames == 62 * FRAMES_PER_SECOND + 30
        assert stamp.total_seconds == pytest.approx(62.4)

    def test_str(self):
        assert str(Timestamp(4, 5, 6)) == "04:05:06"


class TestTrack:
    def test_index_lookup_and_start(self):
        track = Track(1, "AUDIO", [Index(0, Timestamp(0, 0, 0)), Index(1, Timestamp(0, 2, 0))])
        assert track.index(0) == Index(0, Timestamp(0, 0, 0))
        assert track.index(2) is None
        assert track.start == Timestamp(0, 2, 0)

    def test_no_start_without_index_one(self):
        assert Track(1, "AUDIO").start is None

    def test_rems(self):
        track = Track(1, "AUDIO", comments=["REPLAYGAIN_TRACK_GAIN -7.89 dB", "NOTE a", "NOTE b"])
        assert track.rems == {
            "REPLAYGAIN_TRACK_GAIN": ["-7.89 dB"],
            "NOTE": ["a", "b"],
        }


class TestDisc:
    def test_defaults(self):
        disc = Disc()
        assert disc.files == []
        assert disc.comments == []
        assert disc.catalog is None

    def test_tracks_span_files(self):
        disc = Disc(
            files=[
                File("a.wav", "WAVE", [Track(1, "AUDIO"), Track(2, "AUDIO")]),
                File("b.wav", "WAVE"),
                File("c.wav", "WAVE", [Track(3, "AUDIO")]),
            ]
        )
        assert [t.number for t in disc.tracks()] == [1, 2, 3]
