"""Tests for the transcript model and stable speaker ids."""

import pytest

from interview_coding.hash_utils import stable_key_id
from interview_coding.model import UNKNOWN_SPEAKER_ID, Segment, Transcript


class TestSegmentCodes:

    def test_toggle(self):
        segment = Segment(speaker_id=1, text="hi")
        assert segment.toggle_code(5) is True
        assert segment.codes == {5}
        assert segment.toggle_code(5) is False
        assert segment.codes == set()

    def test_add_and_remove(self):
        segment = Segment(speaker_id=1, text="hi")
        segment.add_code(1)
        segment.add_code(1)
        segment.remove_code(2)
        assert segment.codes == {1}

    def test_codes_are_not_shared(self):
        a = Segment(speaker_id=1, text="a")
        b = Segment(speaker_id=1, text="b")
        a.add_code(1)
        assert b.codes == set()


class TestSpeakerName:

    def test_declared(self):
        transcript = Transcript(speakers={3: "Ada"})
        assert transcript.speaker_name(3) == "Ada"

    def test_unknown_resolves_without_declaration(self):
        assert Transcript().speaker_name(UNKNOWN_SPEAKER_ID) == "Unknown"

    def test_undeclared(self):
        with pytest.raises(KeyError):
            Transcript().speaker_name(42)


class TestStableKeyId:

    def test_deterministic(self):
        assert stable_key_id("spk1") == stable_key_id("spk1")

    def test_distinct_keys(self):
        assert stable_key_id("spk1") != stable_key_id("spk2")

    def test_fits_in_64_bits(self):
        assert 0 <= stable_key_id("anything") < 2**64

    def test_known_value(self):
        # md5("spk1") = 83f360de e9e36614 ...
        assert stable_key_id("spk1") == int("83f360dee9e36614", 16)
