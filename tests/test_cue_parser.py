"""Unit tests for the cue-based transcript parser."""

import pytest

from interview_coding.model import UNKNOWN_SPEAKER_ID
from interview_coding.transcripts.base import (
    CueEntryError,
    EmptyCueListError,
    ExtraLinesError,
    InvalidIndexError,
    MissingIndexError,
    MissingTextError,
    MissingTimestampsError,
    ParserError,
)
from interview_coding.transcripts.cue_parser import CueTranscriptParser


def _parse(text):
    return CueTranscriptParser().parse(text)


class TestThreeEntryExample:
    """Two named speakers, one unprefixed statement."""

    def test_three_segments(self, cue_text):
        transcript = _parse(cue_text)
        assert [s.text for s in transcript.segments] == ["A", "B", "C"]

    def test_speakers_include_unknown_at_zero(self, cue_text):
        transcript = _parse(cue_text)
        assert transcript.speakers == {0: "Unknown", 1: "Marcus Dunn", 2: "Edward Cunningham"}

    def test_unprefixed_statement_is_unknown(self, cue_text):
        transcript = _parse(cue_text)
        assert transcript.segments[2].speaker_id == UNKNOWN_SPEAKER_ID == 0

    def test_named_speakers_get_sequential_ids(self, cue_text):
        transcript = _parse(cue_text)
        assert [s.speaker_id for s in transcript.segments[:2]] == [1, 2]


class TestSpeakerAssignment:

    def test_repeated_name_reuses_id(self):
        text = "WEBVTT\n\n1\nt\nAnna: hi\n\n2\nt\nBen: hey\n\n3\nt\nAnna: again\n"
        transcript = _parse(text)
        assert [s.speaker_id for s in transcript.segments] == [1, 2, 1]
        assert len(transcript.speakers) == 3

    def test_only_first_separator_splits(self):
        transcript = _parse("WEBVTT\n\n1\nt\nAnna: note: this stays\n")
        assert transcript.speakers[1] == "Anna"
        assert transcript.segments[0].text == "note: this stays"

    def test_colon_without_space_is_text(self):
        transcript = _parse("WEBVTT\n\n1\nt\nat 10:30 we met\n")
        assert transcript.segments[0].speaker_id == UNKNOWN_SPEAKER_ID
        assert transcript.segments[0].text == "at 10:30 we met"

    def test_explicit_unknown_name_maps_to_zero(self):
        transcript = _parse("WEBVTT\n\n1\nt\nUnknown: who said that\n")
        assert transcript.segments[0].speaker_id == UNKNOWN_SPEAKER_ID

    def test_ids_are_local_to_one_parse(self):
        parser = CueTranscriptParser()
        parser.parse("WEBVTT\n\n1\nt\nAnna: hi\n")
        transcript = parser.parse("WEBVTT\n\n1\nt\nBen: hi\n")
        assert transcript.speakers == {0: "Unknown", 1: "Ben"}


class TestLayout:

    def test_crlf_line_endings(self, cue_text):
        transcript = _parse(cue_text.replace("\n", "\r\n"))
        assert [s.text for s in transcript.segments] == ["A", "B", "C"]

    def test_cr_line_endings(self, cue_text):
        transcript = _parse(cue_text.replace("\n", "\r"))
        assert len(transcript.segments) == 3

    def test_multiple_blank_lines_between_entries(self):
        transcript = _parse("WEBVTT\n\n\n\n1\nt\nA\n\n\n2\nt\nB")
        assert [s.text for s in transcript.segments] == ["A", "B"]

    def test_first_block_is_always_skipped(self):
        # Without a header the first cue is lost, like any other preamble.
        transcript = _parse("1\nt\nA\n\n2\nt\nB\n")
        assert [s.text for s in transcript.segments] == ["B"]

    @pytest.mark.parametrize("text", ["WEBVTT\n", "", "  \n\n "])
    def test_no_entries_is_an_error(self, text):
        with pytest.raises(EmptyCueListError):
            _parse(text)

    def test_empty_statement_is_dropped(self):
        transcript = _parse("WEBVTT\n\n1\nt\nAnna: \n\n2\nt\nB\n")
        assert [s.text for s in transcript.segments] == ["B"]


class TestMalformedEntries:
    """Any malformed entry fails the whole document."""

    def test_missing_text(self):
        text = "WEBVTT\n\n1\n00:00:01.000 --> 00:00:02.000\nA\n\n2\n00:00:02.000 --> 00:00:03.000\n"
        with pytest.raises(MissingTextError):
            _parse(text)

    def test_missing_timestamps(self):
        with pytest.raises(MissingTimestampsError):
            _parse("WEBVTT\n\n1\n")

    def test_missing_index(self):
        with pytest.raises(MissingIndexError) as excinfo:
            _parse("WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nAnna: hi\n")
        assert excinfo.value.line == 3

    @pytest.mark.parametrize("index", ["one", "-1", "1.5", "1a"])
    def test_invalid_index(self, index):
        with pytest.raises(InvalidIndexError):
            _parse(f"WEBVTT\n\n{index}\nt\nA\n")

    def test_extra_lines_are_rejected(self):
        with pytest.raises(ExtraLinesError):
            _parse("WEBVTT\n\n1\nt\nA\nsecond line\n")

    def test_error_points_at_entry(self):
        with pytest.raises(CueEntryError) as excinfo:
            _parse("WEBVTT\n\n1\nt\nA\n\nx\nt\nB\n")
        assert excinfo.value.line == 7
        assert "x" in excinfo.value.excerpt

    def test_structured_document_is_rejected(self, structured_text):
        with pytest.raises(ParserError):
            _parse(structured_text)
