# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript navigation.

The coding UI shows one segment at a time together with a few segments of
context before and after it. `TranscriptNavigator` keeps the cursor and
computes that window on every call. The window is never cached, so code
changes made on the returned segments are always visible in the next redraw.

Windows are index arithmetic over the transcript's own segment list.
`SegmentSlice` exposes a range of that list as a read-only sequence without
copying it.
"""

from collections.abc import Iterator, Sequence
from typing import NamedTuple, overload

from interview_coding.model import Segment, Transcript


class EmptyTranscriptError(ValueError):
    """Raised when navigating a transcript without segments."""


class SegmentSlice(Sequence[Segment]):
    """Read-only view of a contiguous range of segments.

    Items are the live `Segment` objects of the underlying list.
    """

    __slots__ = ("_segments", "_range")

    def __init__(self, segments: list[Segment], start: int, stop: int) -> None:
        self._segments = segments
        self._range = range(start, stop)

    @property
    def indices(self) -> range:
        """Positions of the viewed segments in the transcript."""

        return self._range

    def __len__(self) -> int:
        return len(self._range)

    @overload
    def __getitem__(self, index: int) -> Segment: ...

    @overload
    def __getitem__(self, index: slice) -> SegmentSlice: ...

    def __getitem__(self, index: int | slice) -> Segment | SegmentSlice:
        if isinstance(index, slice):
            sub = self._range[index]
            if sub.step != 1:
                raise ValueError("SegmentSlice does not support extended slicing")
            return SegmentSlice(self._segments, sub.start, max(sub.start, sub.stop))
        return self._segments[self._range[index]]

    def __iter__(self) -> Iterator[Segment]:
        for i in self._range:
            yield self._segments[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SegmentSlice):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SegmentSlice({self._range.start}:{self._range.stop})"


class Window(NamedTuple):
    """Segments around the cursor, in transcript order."""

    before: SegmentSlice
    current: Segment
    after: SegmentSlice


class TranscriptNavigator:
    """Cursor over a non-empty transcript.

    Args:
        transcript:
            The transcript to navigate. It must contain at least one segment.

    Raises:
        EmptyTranscriptError:
            If the transcript has no segments.
    """

    def __init__(self, transcript: Transcript) -> None:
        if not transcript.segments:
            raise EmptyTranscriptError("Transcript must contain at least one segment")

        self._transcript = transcript
        self._cursor = 0

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._transcript.segments)

    def step_forward(self) -> int | None:
        """Move to the next segment.

        Returns:
            The new cursor, or None if the cursor already is on the last
            segment (the cursor is left unchanged).
        """

        if self._cursor + 1 >= len(self._transcript.segments):
            return None

        self._cursor += 1
        return self._cursor

    def step_backward(self) -> int | None:
        """Move to the previous segment.

        Returns:
            The new cursor, or None if the cursor already is on the first
            segment.
        """

        if self._cursor == 0:
            return None

        self._cursor -= 1
        return self._cursor

    def current(self) -> Segment:
        """Return the segment at the cursor.

        Raises:
            IndexError:
                If the segment list was shortened so that the cursor no longer
                points into it.
        """

        segments = self._transcript.segments
        if not 0 <= self._cursor < len(segments):
            raise IndexError(f"Cursor {self._cursor} is out of range for {len(segments)} segment(s)")

        return segments[self._cursor]

    def window(self, before: int, after: int) -> Window:
        """Return the current segment with up to `before`/`after` neighbours.

        Near the start or end of the transcript fewer neighbours are returned.
        The three parts never overlap and, concatenated, form the contiguous run
        of segments around the cursor.

        Args:
            before:
                Maximum number of preceding segments.
            after:
                Maximum number of following segments.

        Raises:
            ValueError:
                If `before` or `after` is negative.
            IndexError:
                See `current()`.
        """

        if before < 0 or after < 0:
            raise ValueError("Window sizes must be >= 0")

        current = self.current()
        segments = self._transcript.segments
        i = self._cursor

        return Window(
            before=SegmentSlice(segments, max(0, i - before), i),
            current=current,
            after=SegmentSlice(segments, i + 1, min(len(segments), i + 1 + after)),
        )
