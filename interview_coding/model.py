# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Canonical transcript model.

All transcript parsers produce the same structure:

- `Transcript.speakers`: speaker id -> display name
- `Transcript.segments`: ordered list of utterances

Speaker ids are unsigned 64-bit integers. Id `0` is reserved for statements
that cannot be attributed to a speaker.
"""

from dataclasses import dataclass, field


UNKNOWN_SPEAKER_ID = 0
UNKNOWN_SPEAKER_NAME = "Unknown"


@dataclass
class Segment:
    """One contiguous utterance.

    Attributes:
        speaker_id:
            Key into `Transcript.speakers`.
        text:
            Plain text of the utterance (never empty).
        codes:
            Opaque code references assigned by the user.
    """

    speaker_id: int
    text: str
    codes: set[int] = field(default_factory=set)

    def add_code(self, code_id: int) -> None:
        self.codes.add(code_id)

    def remove_code(self, code_id: int) -> None:
        self.codes.discard(code_id)

    def toggle_code(self, code_id: int) -> bool:
        """Flip a code reference and return whether it is now assigned."""

        if code_id in self.codes:
            self.codes.discard(code_id)
            return False

        self.codes.add(code_id)
        return True


@dataclass
class Transcript:
    """Parsed interview transcript.

    Attributes:
        speakers:
            Mapping from speaker id to display name.
        segments:
            Utterances in source order.
    """

    speakers: dict[int, str] = field(default_factory=dict)
    segments: list[Segment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)

    def speaker_name(self, speaker_id: int) -> str:
        """Return the display name for a speaker id.

        The reserved unknown id resolves to `"Unknown"` even if the source did
        not declare it.

        Raises:
            KeyError:
                If the id is neither declared nor the reserved unknown id.
        """

        name = self.speakers.get(speaker_id)
        if name is not None:
            return name
        if speaker_id == UNKNOWN_SPEAKER_ID:
            return UNKNOWN_SPEAKER_NAME
        raise KeyError(speaker_id)
