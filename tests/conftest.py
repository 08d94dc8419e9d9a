"""Shared test fixtures.

Sample documents for both supported transcript formats and a small helper to
build transcripts by hand.
"""

import json
import logging

import pytest

from interview_coding import logging_setup
from interview_coding.model import Segment, Transcript


STRUCTURED_SAMPLE = {
    "speakers": [
        {"spkid": "spk1", "name": "Speaker 1"},
        {"spkid": "spk2", "name": "Speaker 2"},
    ],
    "segments": [
        {
            "speaker": "spk1",
            "words": [
                {"start": 3.06, "end": 3.36, "duration": 0.3, "text": "Okay,", "conf": 1, "pristine": True},
                {"start": 3.40, "end": 3.60, "duration": 0.2, "text": "let's", "conf": 0.98, "pristine": True},
                {"start": 3.61, "end": 3.90, "duration": 0.29, "text": "start.", "conf": 0.97, "pristine": True},
            ],
        },
        {
            "speaker": "spk2",
            "words": [
                {"start": 4.10, "end": 4.30, "duration": 0.2, "text": "Sure.", "conf": 0.99, "pristine": True},
            ],
        },
        {
            "speaker": "spk1",
            "words": [
                {"start": 5.00, "end": 5.20, "duration": 0.2, "text": "First", "conf": 1, "pristine": True},
                {"start": 5.21, "end": 5.50, "duration": 0.29, "text": "question.", "conf": 1, "pristine": True},
            ],
        },
    ],
}


CUE_SAMPLE = """WEBVTT

1
00:00:09.640 --> 00:00:13.459
Marcus Dunn: A

2
00:00:13.470 --> 00:00:43.370
Edward Cunningham: B

3
00:00:43.380 --> 00:00:50.870
C
"""


@pytest.fixture
def structured_text():
    """The structured sample as JSON text."""
    return json.dumps(STRUCTURED_SAMPLE)


@pytest.fixture
def cue_text():
    """Three cue entries: two named speakers and one without a prefix."""
    return CUE_SAMPLE


def make_transcript(count):
    """Transcript with `count` segments whose text is "segment <position>"."""
    return Transcript(
        speakers={0: "Unknown"},
        segments=[Segment(speaker_id=0, text=f"segment {i}") for i in range(count)],
    )


@pytest.fixture
def fresh_log_handler():
    """Detach the stderr handler installed by `setup_logging()` after the test.

    The handler is bound to whatever `sys.stderr` was during the test, which
    pytest closes afterwards.
    """
    yield
    if logging_setup._handler is not None:
        logging.getLogger("interview_coding").removeHandler(logging_setup._handler)
        logging_setup._handler = None
