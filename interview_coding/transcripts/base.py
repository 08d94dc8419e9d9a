# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript parser interface and parse errors."""

from dataclasses import dataclass
from typing import Protocol

from interview_coding.model import Transcript


class TranscriptParser(Protocol):
    """Interface for transcript format parsing.

    Implementations turn already decoded text into a canonical transcript.
    They must not fall back to partial results: either the whole document is
    understood or a `ParserError` is raised.
    """

    name: str

    def parse(self, text: str) -> Transcript:
        """Return the canonical transcript for the given document text."""

        raise NotImplementedError


@dataclass(frozen=True)
class ParserError(RuntimeError):
    """Raised for transcript parsing errors."""

    message: str
    line: int | None = None
    excerpt: str | None = None

    def __str__(self) -> str:
        parts: list[str] = []

        if self.line is not None:
            parts.append(f"line {self.line}: {self.message}")
        else:
            parts.append(self.message)

        if isinstance(self.excerpt, str) and self.excerpt.strip():
            excerpt = self.excerpt.strip().replace("\n", " | ")
            if len(excerpt) > 160:
                excerpt = excerpt[:157] + "..."
            parts.append(f"> {excerpt}")

        return "\n".join(parts)


class MalformedStructuredError(ParserError):
    """The document is not a valid structured (JSON) transcript."""


class CueEntryError(ParserError):
    """A cue entry does not follow the index/timestamps/text layout.

    `line` holds the 1-based line number where the entry starts and `excerpt`
    the raw entry.
    """


class MissingIndexError(CueEntryError):
    pass


class MissingTimestampsError(CueEntryError):
    pass


class MissingTextError(CueEntryError):
    pass


class InvalidIndexError(CueEntryError):
    pass


class ExtraLinesError(CueEntryError):
    pass


class EmptyCueListError(ParserError):
    """The document has no cue entries after its header."""


class UnparseableTranscriptError(RuntimeError):
    """No parser could read the document.

    Attributes:
        attempts:
            `(parser name, error)` pairs in the order the parsers were tried.
            Meant for diagnostics, not for end users.
    """

    def __init__(self, attempts: list[tuple[str, Exception]]) -> None:
        self.attempts = attempts
        tried = ", ".join(name for name, _ in attempts) or "none"
        super().__init__(f"Could not parse transcript (tried: {tried})")
