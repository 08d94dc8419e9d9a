# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript format resolution.

Parsers are tried in a fixed priority order. The file name is never consulted,
so a valid JSON transcript is always read as such, even when it happens to be
stored as `.vtt`.
"""

import logging
from pathlib import Path

from interview_coding.model import Transcript
from interview_coding.transcripts.base import ParserError, TranscriptParser, UnparseableTranscriptError
from interview_coding.transcripts.cue_parser import CueTranscriptParser
from interview_coding.transcripts.structured_parser import StructuredTranscriptParser


logger = logging.getLogger(__name__)


# Priority order. Do not reorder: the structured parser is strict enough that
# it never accepts a cue document, the reverse is not true.
_PARSERS: list[TranscriptParser] = [
    StructuredTranscriptParser(),
    CueTranscriptParser(),
]


def decode_transcript(data: bytes | str) -> str:
    """Decode raw transcript bytes as UTF-8 (with or without BOM).

    Raises:
        UnicodeDecodeError:
            If the bytes are not valid UTF-8.
    """

    if isinstance(data, str):
        return data
    return data.decode("utf-8-sig")


def resolve_with_parser(data: bytes | str) -> tuple[TranscriptParser, Transcript]:
    """Parse a transcript and report which parser accepted it.

    Args:
        data:
            Raw file content.

    Returns:
        The accepting parser and the parsed transcript.

    Raises:
        UnparseableTranscriptError:
            If the content cannot be decoded or no parser accepts it.
    """

    try:
        text = decode_transcript(data)
    except UnicodeDecodeError as exc:
        logger.info("Transcript is not valid UTF-8: %s", exc)
        raise UnparseableTranscriptError([("utf-8", exc)]) from exc

    attempts: list[tuple[str, Exception]] = []
    for parser in _PARSERS:
        try:
            transcript = parser.parse(text)
        except ParserError as exc:
            logger.info("Transcript is not in %s format: %s", parser.name, exc)
            attempts.append((parser.name, exc))
            continue

        logger.debug(
            "Parsed %s transcript: %d segment(s), %d speaker(s)",
            parser.name,
            len(transcript.segments),
            len(transcript.speakers),
        )
        return parser, transcript

    raise UnparseableTranscriptError(attempts)


def resolve_transcript(data: bytes | str) -> Transcript:
    """Parse a transcript in any supported format.

    Raises:
        UnparseableTranscriptError:
            If no parser accepts the content.
    """

    _, transcript = resolve_with_parser(data)
    return transcript


def read_transcript(path: Path) -> tuple[str, Transcript]:
    """Read and parse a transcript file.

    Returns:
        The name of the accepting format and the transcript.

    Raises:
        UnparseableTranscriptError:
            If no parser accepts the file content.
        OSError:
            If the file cannot be read.
    """

    parser, transcript = resolve_with_parser(path.read_bytes())
    return parser.name, transcript
