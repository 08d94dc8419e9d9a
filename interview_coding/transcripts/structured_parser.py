# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Structured (JSON) transcript parser.

Expected document shape (additional fields are ignored):

    {
        "speakers": [{"spkid": "spk1", "name": "Speaker 1"}, ...],
        "segments": [
            {"speaker": "spk1", "words": [{"text": "Okay,", "start": 3.06, ...}, ...]},
            ...
        ]
    }

Speaker ids are derived from `spkid` with `stable_key_id()`, so re-reading the
same file yields the same ids. Word timing and confidence are not used.
"""

import json
import logging
from typing import Any

from interview_coding.hash_utils import stable_key_id
from interview_coding.model import Segment, Transcript
from interview_coding.transcripts.base import MalformedStructuredError


logger = logging.getLogger(__name__)


class StructuredTranscriptParser:
    """Parse JSON transcripts with a speaker list and word-level segments."""

    name = "structured"

    def parse(self, text: str) -> Transcript:
        try:
            raw = json.loads(text)
        except (ValueError, RecursionError) as exc:
            # Deeply nested arrays/objects exceed the decoder's recursion limit.
            raise MalformedStructuredError(f"Invalid JSON: {exc}") from exc

        if not isinstance(raw, dict):
            raise MalformedStructuredError("JSON transcript must contain an object at the top level")

        missing = [k for k in ("speakers", "segments") if k not in raw]
        if missing:
            raise MalformedStructuredError(f"JSON transcript is missing required key(s): {', '.join(missing)}")

        speakers = self._parse_speakers(raw.get("speakers"))
        segments: list[Segment] = []

        raw_segments = raw.get("segments")
        if not isinstance(raw_segments, list):
            raise MalformedStructuredError("'segments' must be a list")

        for idx, item in enumerate(raw_segments, start=1):
            speaker_key, words = self._parse_segment(item, idx)
            speaker_id = stable_key_id(speaker_key)

            if speaker_id not in speakers:
                logger.warning(
                    "Segment %d refers to undeclared speaker %r; using the key as its name",
                    idx,
                    speaker_key,
                )
                speakers[speaker_id] = speaker_key

            text = " ".join(words)
            if not text:
                logger.debug("Dropping segment %d without text", idx)
                continue

            segments.append(Segment(speaker_id=speaker_id, text=text))

        return Transcript(speakers=speakers, segments=segments)

    def _parse_speakers(self, value: Any) -> dict[int, str]:
        """Parse the `speakers` list into an id -> name mapping."""

        if not isinstance(value, list):
            raise MalformedStructuredError("'speakers' must be a list")

        speakers: dict[int, str] = {}
        for idx, item in enumerate(value, start=1):
            if not isinstance(item, dict):
                raise MalformedStructuredError(f"Speaker entry must be an object (problem at index {idx})")

            key = item.get("spkid")
            name = item.get("name")
            if not isinstance(key, str):
                raise MalformedStructuredError(f"Speaker entry needs a string 'spkid' (problem at index {idx})")
            if not isinstance(name, str):
                raise MalformedStructuredError(f"Speaker entry needs a string 'name' (problem at index {idx})")

            speakers[stable_key_id(key)] = name

        return speakers

    def _parse_segment(self, item: Any, idx: int) -> tuple[str, list[str]]:
        """Validate one segment entry.

        Returns:
            The native speaker key and the non-empty word texts in source
            order.
        """

        if not isinstance(item, dict):
            raise MalformedStructuredError(f"Segment entry must be an object (problem at index {idx})")

        speaker_key = item.get("speaker")
        if not isinstance(speaker_key, str):
            raise MalformedStructuredError(f"Segment entry needs a string 'speaker' (problem at index {idx})")

        words = item.get("words")
        if not isinstance(words, list):
            raise MalformedStructuredError(f"Segment entry needs a 'words' list (problem at index {idx})")

        texts: list[str] = []
        for w_idx, word in enumerate(words, start=1):
            if not isinstance(word, dict) or not isinstance(word.get("text"), str):
                raise MalformedStructuredError(
                    f"Word entry needs a string 'text' (problem at segments[{idx}].words[{w_idx}])"
                )

            cleaned = word["text"].strip()
            if cleaned:
                texts.append(cleaned)

        return speaker_key, texts
