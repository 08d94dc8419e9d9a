"""Transcript parsing.

Each supported source format has its own parser that converts the document into
the canonical `Transcript` model:

- structured JSON with a speaker list and word-level segments
- cue lists (WebVTT/SRT-like) with optional `Speaker: ` prefixes

`resolve_transcript()` tries the parsers in a fixed order and returns the first
success.
"""

from interview_coding.transcripts.base import ParserError, TranscriptParser, UnparseableTranscriptError
from interview_coding.transcripts.resolver import read_transcript, resolve_transcript

__all__ = [
    "ParserError",
    "TranscriptParser",
    "UnparseableTranscriptError",
    "read_transcript",
    "resolve_transcript",
]
