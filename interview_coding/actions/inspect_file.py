# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript inspection action.

Reads a transcript file, reports which format was detected and prints the
speaker table. Useful to check a file before coding it.
"""

import argparse
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from interview_coding.config import CodingConfig, ConfigError
from interview_coding.model import Transcript
from interview_coding.transcripts.base import UnparseableTranscriptError
from interview_coding.transcripts.resolver import read_transcript


def load_transcript_file(path: Path) -> tuple[str, Transcript]:
    """Read a transcript and normalize errors to ConfigError.

    The per-parser reasons are included, since the CLI user is the one who
    has to fix the file.
    """

    if not path.is_file():
        raise ConfigError(f"Transcript file not found: {path}")

    try:
        return read_transcript(path)
    except OSError as exc:
        raise ConfigError(f"Failed to read transcript '{path}': {exc}") from exc
    except UnparseableTranscriptError as exc:
        details = "\n".join(f"  {name}: {str(err).splitlines()[0]}" for name, err in exc.attempts)
        raise ConfigError(f"Unsupported or malformed transcript: {path}\n{details}") from exc


@dataclass(frozen=True)
class InspectAction:
    """
    `inspect` subcommand.
    """

    name: str = "inspect"
    help: str = "Show format, speakers and statement count of a transcript"
    requires_config: bool = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("file", help="Transcript file (JSON or cue list)")

    def run(self, args: argparse.Namespace, config: CodingConfig | None) -> None:
        """
        Print a summary of the transcript.

        Raises:
            ConfigError:
                If the file cannot be read or parsed.
        """

        _ = config
        path = Path(args.file)
        format_name, transcript = load_transcript_file(path)

        per_speaker = Counter(segment.speaker_id for segment in transcript.segments)

        print(f"File: {path}")
        print(f"Format: {format_name}")
        print(f"Statements: {len(transcript.segments)}")
        print(f"Speakers: {len(transcript.speakers)}")

        for speaker_id, name in sorted(transcript.speakers.items(), key=lambda item: item[1].lower()):
            print(f"  - {name} [{speaker_id}]: {per_speaker.get(speaker_id, 0)} statement(s)")
