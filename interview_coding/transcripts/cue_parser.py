# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Cue-based (subtitle-like) transcript parser.

Rules:
- Entries are separated by at least one empty line.
- The first entry is a header (e.g. `WEBVTT`) and is always skipped.
- Every other entry has exactly three lines:

      1
      00:00:09.640 --> 00:00:13.459
      Marcus Dunn: Yo, this is a test

  The timestamp line must be present but is not interpreted. The text line may
  start with `Speaker name: `; without it the statement is attributed to the
  unknown speaker.

  An entry whose first line already holds the timestamp (`-->`) is reported
  as missing its index.

Any malformed entry fails the whole document, as does a document without any
entry after the header.
"""

import logging
import re

from interview_coding.model import UNKNOWN_SPEAKER_ID, UNKNOWN_SPEAKER_NAME, Segment, Transcript
from interview_coding.transcripts.base import (
    EmptyCueListError,
    ExtraLinesError,
    InvalidIndexError,
    MissingIndexError,
    MissingTextError,
    MissingTimestampsError,
)


logger = logging.getLogger(__name__)


class CueTranscriptParser:
    """Parse WebVTT/SRT-like cue lists into a transcript."""

    name = "cue"

    _INDEX_RE = re.compile(r"^\+?[0-9]+$")
    _SPEAKER_SEPARATOR = ": "
    _TIMING_ARROW = "-->"

    def parse(self, text: str) -> Transcript:
        blocks = self._split_blocks(text)
        if len(blocks) < 2:
            raise EmptyCueListError("Document contains no cue entries")

        # Speaker names -> ids, local to this document.
        speaker_ids: dict[str, int] = {UNKNOWN_SPEAKER_NAME: UNKNOWN_SPEAKER_ID}
        segments: list[Segment] = []

        for start_line, lines in blocks[1:]:
            speaker, statement = self._parse_entry(start_line, lines)

            if speaker is None:
                speaker_id = UNKNOWN_SPEAKER_ID
            else:
                speaker_id = speaker_ids.setdefault(speaker, len(speaker_ids))

            statement = statement.strip()
            if not statement:
                logger.debug("Dropping cue at line %d without text", start_line)
                continue

            segments.append(Segment(speaker_id=speaker_id, text=statement))

        return Transcript(
            speakers={speaker_id: name for name, speaker_id in speaker_ids.items()},
            segments=segments,
        )

    def _split_blocks(self, text: str) -> list[tuple[int, list[str]]]:
        """Split the document into entries.

        Returns:
            `(start line, lines)` tuples. Line numbers are 1-based.
        """

        text = text.replace("\r\n", "\n").replace("\r", "\n")

        blocks: list[tuple[int, list[str]]] = []
        current: list[str] = []
        start_line: int | None = None

        for idx, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                if current:
                    blocks.append((start_line or idx, current))
                    current = []
                    start_line = None
                continue

            if start_line is None:
                start_line = idx
            current.append(line)

        if current:
            blocks.append((start_line or 1, current))

        return blocks

    def _parse_entry(self, start_line: int, lines: list[str]) -> tuple[str | None, str]:
        """Parse one three-line entry.

        Returns:
            The speaker name (or None) and the statement text.
        """

        excerpt = "\n".join(lines)

        if self._TIMING_ARROW in lines[0]:
            raise MissingIndexError(
                "Cue entry starts with a timestamp line, index is missing",
                line=start_line,
                excerpt=excerpt,
            )
        if not self._INDEX_RE.match(lines[0].strip()):
            raise InvalidIndexError(
                f"Cue index is not an unsigned integer: {lines[0].strip()!r}",
                line=start_line,
                excerpt=excerpt,
            )
        if len(lines) < 2:
            raise MissingTimestampsError("Cue entry has no timestamp line", line=start_line, excerpt=excerpt)
        if len(lines) < 3:
            raise MissingTextError("Cue entry has no text line", line=start_line, excerpt=excerpt)
        if len(lines) > 3:
            raise ExtraLinesError(
                f"Cue entry has {len(lines)} lines, expected 3",
                line=start_line,
                excerpt=excerpt,
            )

        speaker, sep, statement = lines[2].partition(self._SPEAKER_SEPARATOR)
        if not sep or not speaker.strip():
            return None, statement if sep else lines[2]
        return speaker.strip(), statement
